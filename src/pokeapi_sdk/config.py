from __future__ import annotations
import argparse, os

from .utils import DEFAULT_BASE_URL

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="PokeAPI SDK demo")
    p.add_argument("--base-url", default=os.getenv("POKEAPI_BASE_URL", DEFAULT_BASE_URL))
    p.add_argument("--connect-timeout", type=float, default=float(os.getenv("CONNECT_TIMEOUT", "5")))
    p.add_argument("--read-timeout", type=float, default=float(os.getenv("READ_TIMEOUT", "30")))
    p.add_argument("--all", action="store_true", help="autopaginate the full Pokémon list (many requests)")
    p.add_argument("-v", "--verbose", action="store_true", help="log every request at DEBUG level")
    return p

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
