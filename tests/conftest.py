"""Shared test fixtures for the neuralcore test suite.

Provides deterministic samplers, a controllable clock, and pre-built
debug services so tests never depend on real randomness or wall time.
"""

from __future__ import annotations

from datetime import datetime
from typing import Sequence, TypeVar

import pytest

from neuralcore.debug.service import NeuralDebugService
from neuralcore.vision.sampler import Sampler

T = TypeVar("T")


class ScriptedSampler(Sampler):
    """Sampler returning pre-scripted integers and choice indexes, cycling."""

    def __init__(self, ints: Sequence[int] = (0,), choices: Sequence[int] = (0,)) -> None:
        self._ints = list(ints)
        self._choices = list(choices)
        self._int_pos = 0
        self._choice_pos = 0
        self.randint_calls: list[tuple[int, int]] = []

    def randint(self, low: int, high: int) -> int:
        self.randint_calls.append((low, high))
        value = self._ints[self._int_pos % len(self._ints)]
        self._int_pos += 1
        return value

    def choice(self, items: Sequence[T]) -> T:
        index = self._choices[self._choice_pos % len(self._choices)]
        self._choice_pos += 1
        return items[index % len(items)]


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ---------------------------------------------------------------------------
# Vision Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def scripted_sampler() -> ScriptedSampler:
    """Sampler alternating lux and frame-id draws: 50/1234, 250/5678, 750/9999."""
    return ScriptedSampler(ints=[50, 1234, 250, 5678, 750, 9999], choices=[0, 3, 6])


@pytest.fixture
def emitted() -> list[str]:
    """Collects lines emitted by the vision loop."""
    return []


# ---------------------------------------------------------------------------
# Debug Service Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def service(fake_clock: FakeClock) -> NeuralDebugService:
    """A debug service on a hand-driven clock and fixed wall time."""
    return NeuralDebugService(
        clock=fake_clock,
        now=lambda: datetime(2025, 1, 1, 12, 34, 56),
    )


@pytest.fixture
def sampler_factory() -> type[ScriptedSampler]:
    """The scripted sampler class, for tests that need a custom script."""
    return ScriptedSampler
