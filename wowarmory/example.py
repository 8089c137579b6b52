"""Command that prints a short summary of one character."""

from __future__ import annotations

import argparse
import sys

from wowarmory.character import CharacterError
from wowarmory.client import ApiError, new_api_client
from wowarmory.models import DecodeError


def main(argv=None):
    """Fetch a character with its items and print its class, item level and points."""
    parser = argparse.ArgumentParser(
        description="Show a character's class, item level and achievement points."
    )
    parser.add_argument("realm", nargs="?", default="Runetotem")
    parser.add_argument("name", nargs="?", default="Capoferro")
    parser.add_argument("--region", default="US")
    parser.add_argument("--locale", default="", help="defaults to the region's locale")
    args = parser.parse_args(argv)

    try:
        client = new_api_client(args.region, args.locale)
        character = client.get_character_with_fields(args.realm, args.name, ["items"])
        class_name = character.class_name()
    except (ApiError, CharacterError, DecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    item_level = character.items.average_item_level if character.items else 0
    print(
        f"{character.name} is the greatest {class_name} ever.\n"
        f"He has an ilvl of {item_level} and {character.achievement_points} achievement points."
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())