from healthcheck.pokemon.client import PokemonApiError, PokemonClient, PokemonUnavailableError

__all__ = ["PokemonApiError", "PokemonClient", "PokemonUnavailableError"]
