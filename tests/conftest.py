import json

import httpx
import pytest

BASE = "http://pokeapi.test/api/v2"

def named(kind: str, name: str, i: int) -> dict:
    return {"name": name, "url": f"{BASE}/{kind}/{i}/"}

def pokemon_json(pid: int = 25, name: str = "pikachu") -> dict:
    return {
        "id": pid,
        "name": name,
        "base_experience": 112,
        "height": 4,
        "weight": 60,
        "is_default": True,
        "abilities": [{"is_hidden": False, "slot": 1, "ability": named("ability", "static", 9)}],
        "forms": [named("pokemon-form", name, pid)],
        "game_indices": [{"game_index": 84, "version": named("version", "red", 1)}],
        "held_items": [{
            "item": named("item", "oran-berry", 132),
            "version_details": [{"version": named("version", "x", 23), "rarity": 50}],
        }],
        "location_area_encounters": f"{BASE}/pokemon/{pid}/encounters",
        "moves": [{
            "move": named("move", "mega-punch", 5),
            "version_group_details": [{
                "move_learn_method": named("move-learn-method", "tutor", 3),
                "version_group": named("version-group", "yellow", 2),
                "level_learned_at": 0,
            }],
        }],
        "sprites": {"front_default": f"https://sprites.test/{pid}.png", "front_shiny": None},
        "species": named("pokemon-species", name, pid),
        "stats": [{"stat": named("stat", "speed", 6), "effort": 2, "base_stat": 90}],
        "types": [{"slot": 1, "type": named("type", "electric", 13)}],
    }

def generation_json(gid: int = 1, name: str = "generation-i") -> dict:
    return {
        "id": gid,
        "name": name,
        "abilities": [],
        "names": [{"name": "Generation I", "language": named("language", "en", 9)}],
        "main_region": named("region", "kanto", 1),
        "moves": [named("move", "pound", 1)],
        "pokemon_species": [named("pokemon-species", "bulbasaur", 1)],
        "types": [named("type", "normal", 1)],
        "version_groups": [named("version-group", "red-blue", 1)],
    }


class FakePokeApi:
    """
    In-memory PokeAPI served through httpx.MockTransport.
    Listings page with limit/offset (default limit 20) and emit absolute `next` links.
    """

    def __init__(self, pokemon_count: int = 45, generation_count: int = 9, default_limit: int = 20):
        self.collections = {
            "pokemon": [named("pokemon", f"mon-{i}", i) for i in range(1, pokemon_count + 1)],
            "generation": [named("generation", f"generation-{i}", i) for i in range(1, generation_count + 1)],
        }
        self.records = {
            "pokemon/25": pokemon_json(),
            "pokemon/pikachu": pokemon_json(),
            "generation/1": generation_json(),
            "generation/generation-i": generation_json(),
        }
        self.default_limit = default_limit
        self.requests: list[httpx.Request] = []

    def page(self, kind: str, limit: int, offset: int) -> dict:
        items = self.collections[kind]
        end = offset + limit
        nxt = f"{BASE}/{kind}?offset={end}&limit={limit}" if end < len(items) else None
        prev = f"{BASE}/{kind}?offset={max(0, offset - limit)}&limit={limit}" if offset > 0 else None
        return {"count": len(items), "next": nxt, "previous": prev, "results": items[offset:end]}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api/v2/").strip("/")
        if path in self.collections:
            limit = int(request.url.params.get("limit", self.default_limit))
            offset = int(request.url.params.get("offset", 0))
            return httpx.Response(200, json=self.page(path, limit, offset))
        if path in self.records:
            return httpx.Response(200, content=json.dumps(self.records[path]).encode())
        return httpx.Response(404, text="Not Found")

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_api():
    return FakePokeApi()
