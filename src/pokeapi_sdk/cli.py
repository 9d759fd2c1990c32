"""
Command-line demo for the PokeAPI SDK.

- Parses CLI args and config
- Initializes PokeApiClient
- Walks through the SDK surface:
    1. Pokémon by ID, then by a name that does not exist
    2. Generation by ID and by name
    3. First 10 Pokémon, and the full list with --all
    4. All generations

Failures are reported per step through `describe_error`; KeyboardInterrupt exits cleanly.
"""
from __future__ import annotations
import asyncio, logging, sys

from .api import PokeApiClient
from .config import parse_args
from .errors import DeserializationError, PokeApiError, RequestError

SEPARATOR = "-------------------------"

def describe_error(error: PokeApiError, resource: str) -> list[str]:
    """Turn a PokeApiError into user-facing lines, most specific case first."""
    if error.is_not_found():
        return [f"{resource} not found.", "Please check if the name or ID is correct."]
    status = error.status_code
    if status is not None:
        if 500 <= status <= 599:
            return [f"Server error (status code {status}) when accessing {resource}.", "Please try again later."]
        return [f"API error (status code {status}) when accessing {resource}."]
    if isinstance(error, RequestError):
        return [f"Network request error: {error.cause}", "Please check your internet connection."]
    if isinstance(error, DeserializationError):
        return [f"Failed to parse the response for {resource}: {error.cause}",
                "This might be due to an unexpected response format."]
    return [f"An unexpected error occurred: {error}"]

def report(error: PokeApiError, resource: str) -> None:
    for line in describe_error(error, resource):
        print(line, file=sys.stderr)

async def show_pokemon(client: PokeApiClient, key: int | str) -> None:
    try:
        if isinstance(key, int):
            pokemon = await client.get_pokemon_by_id(key)
        else:
            pokemon = await client.get_pokemon_by_name(key)
    except PokeApiError as e:
        print(f"Error retrieving Pokémon {key!r}:", file=sys.stderr)
        report(e, "Pokémon")
        return
    print(f"""Retrieved Pokémon {key!r}:
Name: {pokemon.name}
ID: {pokemon.id}
Height: {pokemon.height}
Weight: {pokemon.weight}
{SEPARATOR}""")

async def show_generation(client: PokeApiClient, key: int | str) -> None:
    try:
        if isinstance(key, int):
            generation = await client.get_generation_by_id(key)
        else:
            generation = await client.get_generation_by_name(key)
    except PokeApiError as e:
        print(f"Error retrieving Generation {key!r}:", file=sys.stderr)
        report(e, "Generation")
        return
    print(f"""Retrieved Generation {key!r}:
Generation Name: {generation.name}
Main Region: {generation.main_region.name}
{SEPARATOR}""")

async def run(args) -> None:
    async with PokeApiClient.with_base_url(
        args.base_url,
        connect_timeout=args.connect_timeout,
        read_timeout=args.read_timeout,
    ) as client:
        print(f"""
            ====== PokeAPI SDK demo ======
            Base URL       : {client.base_url}
            Timeouts (s)   : connect={args.connect_timeout} read={args.read_timeout}
            ==============================
        """)
        await show_pokemon(client, 25)
        await show_pokemon(client, "notreal")
        await show_generation(client, 1)
        await show_generation(client, "generation-i")

        first = await client.list_pokemon(limit=10)
        print("First 10 Pokémon:")
        for ref in first:
            print(f"- {ref.name}")
        print(SEPARATOR)

        if args.all:
            everything = await client.list_pokemon(autopaginate=True)
            print(f"Total Pokémon fetched with autopagination: {len(everything)}")
            for ref in everything:
                print(f"- {ref.name}")
            print(SEPARATOR)

        generations = await client.list_generations()
        print("Generations:")
        for ref in generations:
            print(f"- {ref.name}")
        print(SEPARATOR)

def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        asyncio.run(run(args))
    except PokeApiError as e:
        report(e, "listing")
        sys.exit(1)
    except KeyboardInterrupt:
        print("Aborted.", file=sys.stderr)
