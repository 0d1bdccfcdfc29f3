"""Light sensor abstractions.

The only implementation is a simulated lux meter returning random
readings in ``[0, 999]``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from neuralcore.vision.sampler import RandomSampler, Sampler

MIN_LUX = 0
MAX_LUX = 999


class LightSensor(ABC):
    """Abstract ambient light sensor."""

    @abstractmethod
    def measure_light(self) -> int:
        """Return the current illuminance in lux."""
        ...


class SimulatedLightSensor(LightSensor):
    """Lux meter that returns uniformly random readings."""

    def __init__(self, sampler: Sampler | None = None) -> None:
        self._sampler = sampler or RandomSampler()

    def measure_light(self) -> int:
        return self._sampler.randint(MIN_LUX, MAX_LUX)
