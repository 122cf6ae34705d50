"""Random selection helpers: a cycling shuffled order and single random picks."""

from __future__ import annotations

import random

__all__ = ["ShuffleRandom", "random_index"]


class ShuffleRandom:
    """Hands out the indices ``0..size-1`` in a shuffled order, cycling forever.

    ``count`` is the position of the next index to hand out; it may be set
    directly to move within the cycle.
    """

    def __init__(self, size: int, rng: random.Random | None = None) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self.count = 0
        self.order = list(range(size))
        (rng or random.Random()).shuffle(self.order)

    def next_index(self) -> int:
        """Return the next index of the shuffled order, wrapping after the last."""
        if not self.order:
            raise IndexError("no items to choose from")
        if self.count >= self.size:
            self.count = 0
        index = self.order[self.count]
        self.count += 1
        return index

    def count_digits(self) -> int:
        """Number of decimal characters needed to print ``count``."""
        return len(str(self.count))


def random_index(size: int, rng: random.Random | None = None) -> int:
    """Return a uniformly chosen index in ``range(size)``."""
    if size <= 0:
        raise ValueError("size must be positive")
    return (rng or random.Random()).randrange(size)