from __future__ import annotations
import logging, uuid
from typing import Any, List, Optional, Type, Union

import requests

from .api import GENERATION, POKEMON
from .errors import RequestError
from .http_client import DEFAULT_HEADERS, M, check_status, parse_model
from .models import Generation, NamedAPIResource, NamedAPIResourceList, Pokemon
from .pagination import PageCollector, page_params
from .utils import DEFAULT_BASE_URL

log = logging.getLogger(__name__)


class PokeApiSyncClient:
    """Blocking PokeAPI client on a requests.Session, same operations and errors as PokeApiClient."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        connect_timeout: float = 5.0,
        read_timeout: float = 30.0,
        headers: Optional[dict[str, str]] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        # sent per request so a caller-provided session is left untouched
        self.headers = {**DEFAULT_HEADERS, **(headers or {})}
        self.session = session or requests.Session()

    @classmethod
    def with_base_url(cls, base_url: str, **options) -> "PokeApiSyncClient":
        return cls(base_url, **options)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        self.session.close()

    def _get(self, path_or_url: str, model: Type[M], params: Optional[dict[str, Any]] = None) -> M:
        """One GET, classified exactly like the async client. Relative paths resolve under base_url."""
        url = path_or_url if "://" in path_or_url else self.base_url + "/" + path_or_url.lstrip("/")
        req_id = str(uuid.uuid4())
        timeout = (self.connect_timeout, self.read_timeout)
        log.debug("[req#%s] Requesting URL: %s params=%s", req_id, url, params)
        try:
            resp = self.session.get(
                url, params=params, timeout=timeout, headers={**self.headers, "X-Request-Id": req_id}
            )
        except requests.RequestException as e:
            log.debug("[req#%s] GET %s failed: %s", req_id, url, e)
            raise RequestError(e) from e

        log.debug("[req#%s] Response status: %s", req_id, resp.status_code)
        check_status(resp.status_code, resp.url)
        return parse_model(model, resp.content)

    def _list(self, endpoint: str, limit: Optional[int], offset: Optional[int], autopaginate: bool) -> List[NamedAPIResource]:
        collector = PageCollector(autopaginate)
        next_url = collector.add(self._get(endpoint, NamedAPIResourceList, page_params(limit, offset)))
        while next_url is not None:
            next_url = collector.add(self._get(next_url, NamedAPIResourceList))
        return collector.collected(endpoint)

    # API methods
    def get_pokemon_by_id(self, pokemon_id: int) -> Pokemon:
        return self._get(f"{POKEMON}/{pokemon_id}", Pokemon)

    def get_pokemon_by_name(self, name: str) -> Pokemon:
        return self._get(f"{POKEMON}/{name}", Pokemon)

    def get_generation_by_id(self, generation_id: int) -> Generation:
        return self._get(f"{GENERATION}/{generation_id}", Generation)

    def get_generation_by_name(self, name: str) -> Generation:
        return self._get(f"{GENERATION}/{name}", Generation)

    def list_pokemon(self, limit: Optional[int] = None, offset: Optional[int] = None, autopaginate: bool = False) -> List[NamedAPIResource]:
        return self._list(POKEMON, limit, offset, autopaginate)

    def list_generations(self, limit: Optional[int] = None, offset: Optional[int] = None, autopaginate: bool = False) -> List[NamedAPIResource]:
        return self._list(GENERATION, limit, offset, autopaginate)

    def get_pokemon_page(self, limit: Optional[int] = None, offset: Optional[int] = None) -> NamedAPIResourceList:
        return self._get(POKEMON, NamedAPIResourceList, page_params(limit, offset))

    def get_generation_page(self, limit: Optional[int] = None, offset: Optional[int] = None) -> NamedAPIResourceList:
        return self._get(GENERATION, NamedAPIResourceList, page_params(limit, offset))

    def resolve(self, resource: Union[NamedAPIResource, str], model: Type[M]) -> M:
        url = resource.url if isinstance(resource, NamedAPIResource) else resource
        return self._get(url, model)
