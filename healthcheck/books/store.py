"""Book storage — SQLite-backed sample database integration.

Failures surface as ``sqlite3.Error``; the API layer reports them to the
``bookstore`` integration.
"""

from __future__ import annotations

import logging
import sqlite3
import time
import uuid
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent.parent.parent / "data"
DB_PATH = DATA_DIR / "books.db"


@dataclass
class Book:
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    name: str = ""
    created_at: float = field(default_factory=time.time)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Book":
        return cls(
            id=row["id"],
            name=row.get("name", ""),
            created_at=row.get("created_at", 0.0),
        )


class BookStore:
    """SQLite-backed book storage."""

    def __init__(self, db_path: Path | str | None = None) -> None:
        path = Path(db_path) if db_path else DB_PATH
        path.parent.mkdir(parents=True, exist_ok=True)
        self._db_path = str(path)
        self._init_db()

    def _conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_db(self) -> None:
        with self._conn() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS books (
                    id          TEXT PRIMARY KEY,
                    name        TEXT NOT NULL,
                    created_at  REAL NOT NULL
                )
            """)

    def create(self, name: str) -> Book:
        """Insert a new book."""
        book = Book(name=name)
        with self._conn() as conn:
            conn.execute(
                "INSERT INTO books (id, name, created_at) VALUES (:id, :name, :created_at)",
                book.to_dict(),
            )
        logger.debug("Saved book %s (%s)", book.id, name)
        return book

    def get(self, book_id: str) -> Book | None:
        with self._conn() as conn:
            row = conn.execute("SELECT * FROM books WHERE id = ?", (book_id,)).fetchone()
        return Book.from_row(dict(row)) if row else None

    def list_all(self) -> list[Book]:
        with self._conn() as conn:
            rows = conn.execute("SELECT * FROM books ORDER BY created_at").fetchall()
        return [Book.from_row(dict(r)) for r in rows]

    def close(self) -> None:
        """Connections are per-call; nothing to release."""
        pass
