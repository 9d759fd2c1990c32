from .api import PokeApiClient
from .errors import ApiError, DeserializationError, PokeApiError, RequestError
from .models import (
    Generation,
    Name,
    NamedAPIResource,
    NamedAPIResourceList,
    Pokemon,
    PokemonAbility,
    PokemonHeldItem,
    PokemonHeldItemVersion,
    PokemonMove,
    PokemonMoveVersion,
    PokemonSprites,
    PokemonStat,
    PokemonType,
    VersionGameIndex,
)
from .sync_client import PokeApiSyncClient
from .utils import DEFAULT_BASE_URL

__version__ = "0.1.0"

__all__ = [
    "PokeApiClient",
    "PokeApiSyncClient",
    "PokeApiError",
    "RequestError",
    "DeserializationError",
    "ApiError",
    "DEFAULT_BASE_URL",
    "Generation",
    "Name",
    "NamedAPIResource",
    "NamedAPIResourceList",
    "Pokemon",
    "PokemonAbility",
    "PokemonHeldItem",
    "PokemonHeldItemVersion",
    "PokemonMove",
    "PokemonMoveVersion",
    "PokemonSprites",
    "PokemonStat",
    "PokemonType",
    "VersionGameIndex",
]
