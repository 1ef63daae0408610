from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Central configuration loaded from environment / .env file."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 3000

    # Integrations (empty = integrations.yaml next to the package)
    integrations_file: str = ""

    # Sample database integration
    books_db_path: str = ""  # empty = data/books.db

    # Sample API integration
    pokemon_api_url: str = "https://pokeapi.co/api/v2"
    pokemon_timeout: float = 10.0

    # Logging
    log_level: str = "INFO"


settings = Settings()
