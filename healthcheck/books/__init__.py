from healthcheck.books.store import Book, BookStore

__all__ = ["Book", "BookStore"]
