DEFAULT_BASE_URL = "https://pokeapi.co/api/v2/"
USER_AGENT = "pokeapi-sdk-python/0.1.0"


def is_success(status: int) -> bool:
    return 200 <= status < 300
