#!/usr/bin/env python3
"""
Command line entry point for my-chef.

Runs the MCP server (default) or prints plans and recommendations directly.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from .config import Settings, setup_logging
from .data.cookbook import Cookbook
from .mcp_server.tools.recipe_tools import MAX_PEOPLE, MIN_PEOPLE, RecipeTools
from .planning.pools import UniformRandomSource

logger = logging.getLogger(__name__)


def _people_count(value: str) -> int:
    count = int(value)
    if not MIN_PEOPLE <= count <= MAX_PEOPLE:
        raise argparse.ArgumentTypeError(f"must be between {MIN_PEOPLE} and {MAX_PEOPLE}")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="my-chef",
        description="Meal recommendations from the HowToCook recipe catalog",
    )
    parser.add_argument("--offline", action="store_true", help="Use the bundled recipes only")
    parser.add_argument("--log-level", default=None, help="Logging level (default: INFO)")

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("serve", help="Run the MCP server over stdio (default)")
    subparsers.add_parser("categories", help="List recipe categories")

    plan_parser = subparsers.add_parser("plan", help="Print a weekly meal plan")
    plan_parser.add_argument("-n", "--people", type=_people_count, required=True)
    plan_parser.add_argument("--allergy", action="append", default=[], help="Allergen to exclude")
    plan_parser.add_argument("--avoid", action="append", default=[], help="Ingredient to avoid")
    plan_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    eat_parser = subparsers.add_parser("eat", help="Print a quick dish recommendation")
    eat_parser.add_argument("-n", "--people", type=_people_count, required=True)
    eat_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    return parser


def _print_json(data):
    print(json.dumps(data, indent=2, ensure_ascii=False))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    settings = Settings.from_env()
    if args.offline:
        settings.offline = True
    if args.log_level:
        settings.log_level = args.log_level.upper()
    setup_logging(settings.log_level)

    command = args.command or "serve"
    logger.info(f"Running command: {command} (offline={settings.offline})")

    if command == "serve":
        from .mcp_server.server import MyChefServer

        asyncio.run(MyChefServer(settings=settings).run())
        return 0

    cookbook = Cookbook(settings).load()

    if command == "categories":
        for category in cookbook.categories:
            print(category)
        return 0

    seed = args.seed if args.seed is not None else settings.random_seed
    tools = RecipeTools(cookbook, UniformRandomSource(seed))

    if command == "plan":
        _print_json(tools.recommend_meals(args.people, args.allergy, args.avoid))
    elif command == "eat":
        _print_json(tools.what_to_eat(args.people))

    return 0


if __name__ == "__main__":
    sys.exit(main())
