"""Uniform random integers for battle decisions."""

import random


def generate(low: int, high: int) -> int:
    """Return a random integer ``n`` with ``low <= n <= high``."""
    if low > high:
        raise ValueError(f"empty range: {low} > {high}")
    return random.randint(low, high)