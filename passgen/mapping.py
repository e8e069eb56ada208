"""
Character categories and the combined pool a generator draws from.
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import PasswordConfig

SYMBOLS = "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"
NUMBERS = "0123456789"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"

# Seed and pool order. Both phases walk categories in this sequence.
CATEGORY_ORDER: tuple[str, ...] = ("symbols", "numbers", "uppercase", "lowercase")

ALPHABETS: dict[str, str] = {
    "symbols": SYMBOLS,
    "numbers": NUMBERS,
    "uppercase": UPPERCASE,
    "lowercase": LOWERCASE,
}


@dataclass(frozen=True)
class CharacterPool:
    """
    Per-category alphabets plus their concatenation.

    A disabled category keeps an empty alphabet, so the seed phase can
    skip it by checking for emptiness alone.
    """

    symbols: str
    numbers: str
    uppercase: str
    lowercase: str

    # Enabled alphabets joined in CATEGORY_ORDER.
    chars: str

    def alphabet(self, category: str) -> str:
        if category not in CATEGORY_ORDER:
            raise KeyError(f"Unknown category: {category!r}")
        return getattr(self, category)

    @property
    def enabled(self) -> tuple[str, ...]:
        return tuple(name for name in CATEGORY_ORDER if self.alphabet(name))

    def __len__(self) -> int:
        return len(self.chars)


def build_pool(config: PasswordConfig) -> CharacterPool:
    """
    Turn the category flags of a config into a CharacterPool.

    The config is expected to be validated already; with no category
    enabled the pool comes back empty.
    """
    flags = {
        "symbols": config.allow_symbols,
        "numbers": config.allow_numbers,
        "uppercase": config.allow_uppercase,
        "lowercase": config.allow_lowercase,
    }
    selected = {
        name: (ALPHABETS[name] if flags[name] else "") for name in CATEGORY_ORDER
    }
    chars = "".join(selected[name] for name in CATEGORY_ORDER)
    return CharacterPool(chars=chars, **selected)


def category_of(ch: str) -> str | None:
    """Return the category name a character belongs to, or None."""
    if len(ch) != 1:
        return None
    for name in CATEGORY_ORDER:
        if ch in ALPHABETS[name]:
            return name
    return None


def count_categories(password: str) -> dict[str, int]:
    """Count how many characters of each category a password holds."""
    counts = dict.fromkeys(CATEGORY_ORDER, 0)
    for ch in password:
        name = category_of(ch)
        if name is not None:
            counts[name] += 1
    return counts
