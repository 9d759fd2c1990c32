from __future__ import annotations
import logging, uuid
from typing import Any, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .errors import ApiError, DeserializationError, RequestError
from .utils import USER_AGENT, is_success

log = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

DEFAULT_HEADERS = {"Accept": "application/json", "User-Agent": USER_AGENT}


def check_status(status_code: int, url: str) -> None:
    """Raise ApiError for any non-2xx status."""
    if not is_success(status_code):
        raise ApiError(status_code, url)


def parse_model(model: Type[M], content: bytes) -> M:
    try:
        return model.model_validate_json(content)
    except ValidationError as e:
        raise DeserializationError(e) from e


class HttpClient:
    """
    - Reusable async HTTP client with:
      - base_url
      - httpx timeouts
      - one pooled httpx.AsyncClient shared by every call
      - no retries: each failure is classified and raised
    """

    def __init__(
        self,
        base_url: str,
        connect_timeout: float = 5.0,
        read_timeout: float = 30.0,
        *,
        default_headers: Optional[dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = httpx.Timeout(
            connect=connect_timeout,
            read=read_timeout,
            write=read_timeout,
            pool=read_timeout,
        )
        self.default_headers = {**DEFAULT_HEADERS, **(default_headers or {})}
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers=self.default_headers,
            follow_redirects=True,
            transport=transport,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def url_for(self, path: str) -> str:
        return str(self._client.base_url.join(path.lstrip("/")))

    async def get(self, url: str, params: Optional[dict[str, Any]] = None) -> httpx.Response:
        """
        Send exactly one GET. `url` is an endpoint path under base_url or an absolute URL.
        Transport failures (and URLs httpx refuses to build) become RequestError;
        non-2xx becomes ApiError.
        Each request is tagged with X-Request-Id for traceability.
        """
        req_id = str(uuid.uuid4())
        log.debug("[req#%s] Requesting URL: %s params=%s", req_id, url, params)
        try:
            resp = await self._client.get(url, params=params, headers={"X-Request-Id": req_id})
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            log.debug("[req#%s] GET %s failed: %s", req_id, url, e)
            raise RequestError(e) from e

        log.debug("[req#%s] Response status: %s", req_id, resp.status_code)
        check_status(resp.status_code, str(resp.request.url))
        return resp

    async def get_model(self, url: str, model: Type[M], params: Optional[dict[str, Any]] = None) -> M:
        resp = await self.get(url, params=params)
        return parse_model(model, resp.content)
