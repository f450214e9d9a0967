"""
Runtime configuration for my-chef.

Values come from the environment (optionally a .env file loaded with
python-dotenv). Every setting has a default so the server runs without any
configuration.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_RECIPES_URL = "https://weilei.site/all_recipes.json"
DEFAULT_ARCHIVE_PATH = Path(__file__).parent / "data" / "archives" / "all_recipes.json"
DEFAULT_FETCH_TIMEOUT = 10.0

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Settings shared by the server, the CLI and the catalog loader."""

    recipes_url: str = DEFAULT_RECIPES_URL
    archive_path: Path = DEFAULT_ARCHIVE_PATH
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    offline: bool = False
    random_seed: Optional[int] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        """
        Build settings from MY_CHEF_* environment variables.

        Args:
            dotenv: Load a .env file first (default: True)

        Returns:
            Settings instance

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        if dotenv:
            load_dotenv()

        seed = os.getenv("MY_CHEF_RANDOM_SEED")
        archive = os.getenv("MY_CHEF_ARCHIVE_PATH")

        return cls(
            recipes_url=os.getenv("MY_CHEF_RECIPES_URL", DEFAULT_RECIPES_URL),
            archive_path=Path(archive) if archive else DEFAULT_ARCHIVE_PATH,
            fetch_timeout=_parse_float(
                "MY_CHEF_FETCH_TIMEOUT", os.getenv("MY_CHEF_FETCH_TIMEOUT"), DEFAULT_FETCH_TIMEOUT
            ),
            offline=os.getenv("MY_CHEF_OFFLINE", "").strip().lower() in _TRUTHY,
            random_seed=_parse_int("MY_CHEF_RANDOM_SEED", seed) if seed else None,
            log_level=os.getenv("MY_CHEF_LOG_LEVEL", "INFO").upper(),
        )


def _parse_float(name: str, value: Optional[str], default: float) -> float:
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}")


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


def setup_logging(level: str = "INFO"):
    """Configure root logging. Output goes to stderr; stdout carries MCP traffic."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
