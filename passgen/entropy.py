"""
Entropy source:
Hands out a fresh random generator for each password, backed by the OS.
"""

from __future__ import annotations

import random
import secrets


def local_rng(seed: bytes | None = None) -> random.Random:
    """
    Return a new, caller-owned random generator.

    Without a seed this is a SystemRandom drawing from os.urandom, so
    two calls never share state. Passing a seed gives a repeatable
    Mersenne Twister instead.
    """
    if seed is None:
        return secrets.SystemRandom()
    return random.Random(int.from_bytes(seed, "big"))
