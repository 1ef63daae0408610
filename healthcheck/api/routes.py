"""Sample routes that exercise the tracked integrations.

Each route performs a real dependency operation and reports a failure to
the integration registry before answering 500.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Any

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from healthcheck.books.store import BookStore
from healthcheck.health.engine import IntegrationRegistry
from healthcheck.pokemon.client import PokemonApiError, PokemonClient, PokemonUnavailableError

logger = logging.getLogger(__name__)

router = APIRouter()

BOOKSTORE = "bookstore"
POKEMON = "pokemon"


class CreateBookBody(BaseModel):
    name: str


@router.get("/", response_class=PlainTextResponse)
def index() -> str:
    return "Hello World!"


@router.post("/book")
async def create_book(body: CreateBookBody, request: Request) -> dict[str, Any]:
    """Save a book. The name ``error`` simulates a database failure.

    Runs on the event loop; the registry is never touched from worker threads.
    """
    store: BookStore | None = request.app.state.book_store
    registry: IntegrationRegistry = request.app.state.integrations

    try:
        if body.name == "error":
            raise sqlite3.OperationalError("simulated database failure")
        if store is None:
            raise sqlite3.OperationalError("book store is not available")
        book = store.create(body.name)
    except sqlite3.Error as e:
        logger.warning("Book save failed: %s", e)
        registry.report_error(BOOKSTORE)
        raise HTTPException(status_code=500, detail="Error")

    return {"message": "Book saved", "book": book.to_dict()}


@router.get("/pokemon/{name}")
async def get_pokemon(name: str, request: Request) -> dict[str, Any]:
    client: PokemonClient = request.app.state.pokemon_client
    registry: IntegrationRegistry = request.app.state.integrations

    try:
        return await client.get_pokemon(name)
    except (PokemonApiError, PokemonUnavailableError, ValueError) as e:
        logger.warning("Pokemon lookup failed for %s: %s", name, e)
        registry.report_error(POKEMON)
        raise HTTPException(status_code=500, detail="Error")
