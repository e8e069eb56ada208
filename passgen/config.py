"""
Configuration for the password generator.
"""

from __future__ import annotations

from dataclasses import dataclass

# Inclusive bounds on the generated password length.
MIN_LENGTH = 8
MAX_LENGTH = 128


class ConfigError(ValueError):
    """Raised when a PasswordConfig cannot be used to build a generator."""


class LengthOutOfRange(ConfigError):
    def __init__(self, length: object) -> None:
        self.length = length
        self.minimum = MIN_LENGTH
        self.maximum = MAX_LENGTH
        super().__init__(
            f"Length must be between {MIN_LENGTH} and {MAX_LENGTH}."
        )


class NoCategorySelected(ConfigError):
    def __init__(self) -> None:
        super().__init__(
            "At least one of symbols, numbers, uppercase, or lowercase "
            "must be set to true."
        )


@dataclass(frozen=True)
class PasswordConfig:
    # Desired password length in characters.
    length: int = MIN_LENGTH

    # Character categories to draw from. At least one must stay enabled.
    allow_symbols: bool = True
    allow_numbers: bool = True
    allow_uppercase: bool = True
    allow_lowercase: bool = True


def validate(config: PasswordConfig) -> PasswordConfig:
    """
    Check a config and return it unchanged.

    The length check runs first, so a config that breaks both rules
    reports LengthOutOfRange.
    """
    length = config.length
    if (
        isinstance(length, bool)
        or not isinstance(length, int)
        or length < MIN_LENGTH
        or length > MAX_LENGTH
    ):
        raise LengthOutOfRange(length)

    if not (
        config.allow_symbols
        or config.allow_numbers
        or config.allow_uppercase
        or config.allow_lowercase
    ):
        raise NoCategorySelected()

    return config


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = PasswordConfig()
