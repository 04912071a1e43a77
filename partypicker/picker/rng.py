"""Seeded randomness helpers for reproducible picks."""

import random
from typing import Optional


def build_rng(*, seed: Optional[int] = None) -> random.Random:
    """Return a random generator, deterministic when seeded."""
    return random.Random(seed)
