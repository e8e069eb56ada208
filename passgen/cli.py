"""
Command-line entry point and high-level generator functions.
"""
from __future__ import annotations

import logging
import math
import sys
from dataclasses import dataclass

from .config import PasswordConfig, DEFAULT_CONFIG, ConfigError
from .generator import PasswordGenerator
from .mapping import count_categories

logger = logging.getLogger(__name__)


@dataclass
class GenerationMeta:
    """
    Full result of one password generation.
    """
    password: str

    # Theoretical estimate: length * log2(pool size)
    entropy_bits: float

    # Enabled categories, in seed order
    categories: tuple[str, ...]

    # Characters per category in the password itself
    category_counts: dict[str, int]
    config: PasswordConfig


def generate_password_with_meta(
    config: PasswordConfig | None = None,
) -> GenerationMeta:
    """
    Generate one password and report how it was built.

    Raises ConfigError when the config is invalid.
    """
    generator = PasswordGenerator(config or DEFAULT_CONFIG)
    password = generator.generate()

    return GenerationMeta(
        password=password,
        entropy_bits=len(password) * math.log2(len(generator.pool)),
        categories=generator.pool.enabled,
        category_counts=count_categories(password),
        config=generator.config,
    )


def generate_password(
    config: PasswordConfig | None = None,
) -> str:
    return PasswordGenerator(config or DEFAULT_CONFIG).generate()


def main() -> int:
    """
    Entry point for `python -m passgen`, `run_passgen.py` and the
    `passgen` console script.
    """
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    try:
        generator = PasswordGenerator(DEFAULT_CONFIG)
    except ConfigError as exc:
        # Unreachable with the built-in defaults.
        logger.error("Failed to create generator: %s", exc)
        return 1

    print(generator.generate())
    return 0


if __name__ == "__main__":
    sys.exit(main())
