"""Sampling strategies for the simulated vision pipeline.

Every random draw in the vision package goes through a :class:`Sampler`
so tests can substitute a deterministic one.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Sequence, TypeVar

T = TypeVar("T")


class Sampler(ABC):
    """Source of uniform random draws."""

    @abstractmethod
    def randint(self, low: int, high: int) -> int:
        """Return an integer uniformly drawn from ``[low, high]``."""
        ...

    @abstractmethod
    def choice(self, items: Sequence[T]) -> T:
        """Return one element of ``items`` drawn uniformly."""
        ...


class RandomSampler(Sampler):
    """Sampler backed by :class:`random.Random`."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def randint(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)

    def choice(self, items: Sequence[T]) -> T:
        return self._rng.choice(items)
