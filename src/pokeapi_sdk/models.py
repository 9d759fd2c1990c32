"""
Pydantic models for responses from the PokeAPI.

Includes:
- NamedAPIResource: {name, url} reference to another resource
- NamedAPIResourceList: one page of a paginated listing
- Pokemon: record from /pokemon/{id or name}
- Generation: record from /generation/{id or name}

All models are frozen. Unknown fields sent by the API are ignored.
"""

from __future__ import annotations
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class NamedAPIResource(_Record):
    name: str
    url: str

# GET /{endpoint}?limit=&offset=
class NamedAPIResourceList(_Record):
    count: int
    next: Optional[str] = None
    previous: Optional[str] = None
    results: List[NamedAPIResource]


class PokemonAbility(_Record):
    is_hidden: bool
    slot: int
    ability: NamedAPIResource


class VersionGameIndex(_Record):
    game_index: int
    version: NamedAPIResource


class PokemonHeldItemVersion(_Record):
    version: NamedAPIResource
    rarity: int


class PokemonHeldItem(_Record):
    item: NamedAPIResource
    version_details: List[PokemonHeldItemVersion]


class PokemonMoveVersion(_Record):
    move_learn_method: NamedAPIResource
    version_group: NamedAPIResource
    level_learned_at: int


class PokemonMove(_Record):
    move: NamedAPIResource
    version_group_details: List[PokemonMoveVersion]


class PokemonSprites(_Record):
    """Default sprite URLs; any of them may be null upstream."""
    front_default: Optional[str] = None
    front_shiny: Optional[str] = None
    back_default: Optional[str] = None
    back_shiny: Optional[str] = None


class PokemonStat(_Record):
    stat: NamedAPIResource
    effort: int
    base_stat: int


class PokemonType(_Record):
    slot: int
    type: NamedAPIResource

# GET /pokemon/{id or name}
class Pokemon(_Record):
    id: int
    name: str
    base_experience: Optional[int] = None   # null for some alternate forms
    height: int
    weight: int
    abilities: List[PokemonAbility]
    forms: List[NamedAPIResource]
    game_indices: List[VersionGameIndex]
    held_items: List[PokemonHeldItem]
    location_area_encounters: str
    moves: List[PokemonMove]
    sprites: PokemonSprites
    species: NamedAPIResource
    stats: List[PokemonStat]
    types: List[PokemonType]


class Name(_Record):
    name: str
    language: NamedAPIResource

# GET /generation/{id or name}
class Generation(_Record):
    id: int
    name: str
    abilities: List[NamedAPIResource]
    names: List[Name]
    main_region: NamedAPIResource
    moves: List[NamedAPIResource]
    pokemon_species: List[NamedAPIResource]
    types: List[NamedAPIResource]
    version_groups: List[NamedAPIResource]
