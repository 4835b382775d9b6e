from __future__ import annotations

import random
import string
from typing import Optional, Sequence, TypeVar

CURRENCIES = ("EUR", "KSH", "USD")

T = TypeVar("T")


class RandomData:
    """Seedable generator for fake owners, amounts and currencies.

    Each instance owns its own ``random.Random``; pass a seed to get a
    reproducible sequence.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def random_int(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high]``, both ends inclusive."""
        return self._rng.randint(low, high)

    def random_string(self, length: int) -> str:
        return "".join(self._rng.choice(string.ascii_lowercase) for _ in range(length))

    def random_owner(self) -> str:
        return self.random_string(6)

    def random_money(self) -> int:
        return self.random_int(0, 1000)

    def random_currency(self) -> str:
        return self._rng.choice(CURRENCIES)

    def random_sample(self, population: Sequence[T], k: int) -> list[T]:
        """Pick ``k`` distinct items from ``population``."""
        return self._rng.sample(population, k)
