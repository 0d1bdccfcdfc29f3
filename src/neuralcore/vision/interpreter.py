"""Simulated visual recognizer.

Picks an object label at random and pairs it with the light condition
of the reading. The frame text is accepted but not inspected.
"""

from __future__ import annotations

from typing import Sequence

from neuralcore.domain.models import OBJECT_LABELS, LightCondition, format_analysis
from neuralcore.vision.sampler import RandomSampler, Sampler


class FrameInterpreter:
    """Labels captured frames with a randomly "recognized" object."""

    def __init__(
        self,
        sampler: Sampler | None = None,
        labels: Sequence[str] = OBJECT_LABELS,
    ) -> None:
        if not labels:
            raise ValueError("At least one object label is required")
        self._sampler = sampler or RandomSampler()
        self._labels = tuple(labels)

    @property
    def labels(self) -> tuple[str, ...]:
        return self._labels

    def recognize(self, lux: int) -> tuple[str, LightCondition]:
        """Return the recognized label and the light condition for ``lux``."""
        return self._sampler.choice(self._labels), LightCondition.from_lux(lux)

    def process_frame(self, frame: str, lux: int) -> str:
        """Return the ``Objeto: ... | Condição: ...`` analysis line."""
        label, condition = self.recognize(lux)
        return format_analysis(label, condition)
