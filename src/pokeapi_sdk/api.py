"""
Async API wrapper around the PokeAPI endpoints.

Provides a typed interface for:
- Fetching a single Pokémon or Generation by ID or name
- Listing Pokémon and Generations, optionally following every page
- Fetching one raw page of a listing (with its `count`)
- Dereferencing a NamedAPIResource into a full record

All methods return models from `models.py` and raise a `PokeApiError`
subclass on failure.
"""
from __future__ import annotations
from typing import List, Optional, Type, Union

import httpx

from .http_client import HttpClient, M
from .models import Generation, NamedAPIResource, NamedAPIResourceList, Pokemon
from .pagination import fetch_all, fetch_page, page_params
from .utils import DEFAULT_BASE_URL

POKEMON = "pokemon"
GENERATION = "generation"


class PokeApiClient:
    """
    Client for the PokeAPI.

    One instance owns one connection pool and can be shared by any number of
    concurrent calls. Use `with_base_url` to target a mock server or another
    deployment.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        connect_timeout: float = 5.0,
        read_timeout: float = 30.0,
        headers: Optional[dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.http = HttpClient(
            base_url,
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
            default_headers=headers,
            transport=transport,
        )

    @classmethod
    def with_base_url(cls, base_url: str, **options) -> "PokeApiClient":
        return cls(base_url, **options)

    @property
    def base_url(self) -> str:
        return self.http.base_url

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()

    async def aclose(self) -> None:
        await self.http.aclose()

    async def get_pokemon_by_id(self, pokemon_id: int) -> Pokemon:
        return await self._get_resource(f"{POKEMON}/{pokemon_id}", Pokemon)

    async def get_pokemon_by_name(self, name: str) -> Pokemon:
        return await self._get_resource(f"{POKEMON}/{name}", Pokemon)

    async def get_generation_by_id(self, generation_id: int) -> Generation:
        return await self._get_resource(f"{GENERATION}/{generation_id}", Generation)

    async def get_generation_by_name(self, name: str) -> Generation:
        return await self._get_resource(f"{GENERATION}/{name}", Generation)

    async def list_pokemon(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        autopaginate: bool = False,
    ) -> List[NamedAPIResource]:
        """
        List Pokémon references.

        With `autopaginate=True` every page is fetched and the results are
        concatenated in server order; otherwise only the first page is returned.
        """
        return await self._list(POKEMON, limit, offset, autopaginate)

    async def list_generations(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        autopaginate: bool = False,
    ) -> List[NamedAPIResource]:
        return await self._list(GENERATION, limit, offset, autopaginate)

    async def get_pokemon_page(self, limit: Optional[int] = None, offset: Optional[int] = None) -> NamedAPIResourceList:
        return await fetch_page(self.http, POKEMON, page_params(limit, offset))

    async def get_generation_page(self, limit: Optional[int] = None, offset: Optional[int] = None) -> NamedAPIResourceList:
        return await fetch_page(self.http, GENERATION, page_params(limit, offset))

    async def resolve(self, resource: Union[NamedAPIResource, str], model: Type[M]) -> M:
        """Follow a resource reference (or a raw URL) and parse it as `model`."""
        url = resource.url if isinstance(resource, NamedAPIResource) else resource
        return await self.http.get_model(url, model)

    async def _list(
        self,
        endpoint: str,
        limit: Optional[int],
        offset: Optional[int],
        autopaginate: bool,
    ) -> List[NamedAPIResource]:
        return await fetch_all(self.http, endpoint, autopaginate, limit, offset)

    async def _get_resource(self, endpoint: str, model: Type[M]) -> M:
        return await self.http.get_model(endpoint, model)
