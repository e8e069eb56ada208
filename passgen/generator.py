"""
Password generator: seeds one character per enabled category, fills the
rest from the combined pool and shuffles the result.
"""

from __future__ import annotations

import logging
import random

from .config import PasswordConfig, DEFAULT_CONFIG, validate
from .entropy import local_rng
from .mapping import CATEGORY_ORDER, CharacterPool, build_pool

logger = logging.getLogger(__name__)


class PasswordGenerator:
    """
    Encapsulates a validated config and its character pool.

    Nothing is mutated after __init__, so one instance can serve any
    number of callers. Every generate() call draws from its own RNG.
    """

    def __init__(self, config: PasswordConfig | None = None) -> None:
        self.config = validate(config or DEFAULT_CONFIG)
        self.length = self.config.length
        self.pool: CharacterPool = build_pool(self.config)

        logger.debug(
            "Generator ready: length=%d categories=%s pool_size=%d",
            self.length,
            ",".join(self.pool.enabled),
            len(self.pool),
        )

    @classmethod
    def from_config(cls, config: PasswordConfig) -> "PasswordGenerator":
        return cls(config)

    def _seed(self, rng: random.Random) -> list[str]:
        """
        Draw one character from every non-empty category alphabet.

        At most len(CATEGORY_ORDER) characters come back, which is below
        MIN_LENGTH, so this never overfills the buffer.
        """
        buf: list[str] = []
        for name in CATEGORY_ORDER:
            alphabet = self.pool.alphabet(name)
            if alphabet:
                buf.append(rng.choice(alphabet))
        return buf

    def _fill(self, buf: list[str], rng: random.Random) -> None:
        # Draws come from the whole pool, seeded categories included.
        chars = self.pool.chars
        while len(buf) < self.length:
            buf.append(rng.choice(chars))

    def generate(self, rng: random.Random | None = None) -> str:
        """
        Build one password. Each call is independent of the others.

        `rng` is only there so tests can pin the sequence.
        """
        rng = rng or local_rng()

        buf = self._seed(rng)
        self._fill(buf, rng)

        # Randomize the positions of the seeded characters
        rng.shuffle(buf)
        return "".join(buf)
