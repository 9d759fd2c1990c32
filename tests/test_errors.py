import httpx
import pytest
from pydantic import ValidationError

from pokeapi_sdk.errors import ApiError, DeserializationError, PokeApiError, RequestError
from pokeapi_sdk.models import NamedAPIResource

def test_api_error_not_found_inspection():
    e = ApiError(404, "http://pokeapi.test/api/v2/pokemon/notreal")
    assert isinstance(e, PokeApiError)
    assert e.is_not_found()
    assert e.status_code == 404
    assert e.url == "http://pokeapi.test/api/v2/pokemon/notreal"
    assert str(e) == "API error 404: http://pokeapi.test/api/v2/pokemon/notreal"

def test_api_error_server_error_is_not_not_found():
    e = ApiError(503, "http://pokeapi.test/api/v2/pokemon")
    assert not e.is_not_found()
    assert e.status_code == 503

def test_request_error_has_no_status_or_url():
    cause = httpx.ConnectError("connection refused")
    e = RequestError(cause)
    assert e.cause is cause
    assert not e.is_not_found()
    assert e.status_code is None
    assert e.url is None
    assert str(e).startswith("Request error: ")

def test_deserialization_error_carries_parse_error():
    with pytest.raises(ValidationError) as info:
        NamedAPIResource.model_validate_json(b'{"name": "x"}')
    e = DeserializationError(info.value)
    assert e.cause is info.value
    assert e.status_code is None and e.url is None
    assert not e.is_not_found()
    assert str(e).startswith("Deserialization error: ")
