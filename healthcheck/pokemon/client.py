"""httpx-based client for the public Pokémon API (sample API integration).

All methods return parsed JSON or raise PokemonUnavailableError / PokemonApiError.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class PokemonUnavailableError(Exception):
    """Raised when the API is unreachable or times out."""


class PokemonApiError(Exception):
    """Raised when the API returns an error status."""

    def __init__(self, status_code: int, detail: str) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Pokemon API error {status_code}: {detail}")


class PokemonClient:
    """Async httpx client for https://pokeapi.co."""

    def __init__(
        self,
        base_url: str = "https://pokeapi.co/api/v2",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def get_pokemon(self, name: str) -> dict[str, Any]:
        """GET /pokemon/{name}"""
        try:
            resp = await self._client.get(f"{self._base_url}/pokemon/{name}")
        except httpx.ConnectError:
            raise PokemonUnavailableError("Pokemon API is unreachable")
        except httpx.TimeoutException:
            raise PokemonUnavailableError("Pokemon API request timed out")
        except httpx.HTTPError as e:
            raise PokemonUnavailableError(f"Pokemon API transport error: {type(e).__name__}: {e}")

        if resp.status_code >= 400:
            raise PokemonApiError(resp.status_code, resp.text[:200])
        return resp.json()

    async def close(self) -> None:
        await self._client.aclose()
