"""
Category-balanced random password generator package.
"""

from .config import (
    PasswordConfig,
    DEFAULT_CONFIG,
    MIN_LENGTH,
    MAX_LENGTH,
    ConfigError,
    LengthOutOfRange,
    NoCategorySelected,
    validate,
)
from .mapping import CharacterPool, build_pool, count_categories
from .generator import PasswordGenerator
from .cli import GenerationMeta, generate_password, generate_password_with_meta

__all__ = [
    "PasswordConfig",
    "DEFAULT_CONFIG",
    "MIN_LENGTH",
    "MAX_LENGTH",
    "ConfigError",
    "LengthOutOfRange",
    "NoCategorySelected",
    "validate",
    "CharacterPool",
    "build_pool",
    "count_categories",
    "PasswordGenerator",
    "GenerationMeta",
    "generate_password",
    "generate_password_with_meta",
]
