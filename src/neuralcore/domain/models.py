"""Core domain models for neuralcore.

These models represent the data flowing through both components: the
state owned by a debug service instance and the observations produced
by the simulated vision loop.
"""

from __future__ import annotations

import enum
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Debug service
# ---------------------------------------------------------------------------


class ServiceStatus(str, enum.Enum):
    """Lifecycle of a debug service instance. INACTIVE is terminal."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class ServiceState(BaseModel):
    """State owned by a single debug service instance."""

    status: ServiceStatus = Field(default=ServiceStatus.ACTIVE)
    started_at: float = Field(description="Monotonic clock reading at instantiation")

    @property
    def active(self) -> bool:
        return self.status is ServiceStatus.ACTIVE


# ---------------------------------------------------------------------------
# Vision
# ---------------------------------------------------------------------------


OBJECT_LABELS: tuple[str, ...] = (
    "humano",
    "cachorro",
    "computador",
    "árvore",
    "celular",
    "luz forte",
    "movimento rápido",
)

LOW_LIGHT_THRESHOLD = 100
MODERATE_LIGHT_THRESHOLD = 500


class LightCondition(str, enum.Enum):
    """Qualitative light bucket derived from a lux reading."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"

    @property
    def label(self) -> str:
        return _CONDITION_LABELS[self]

    @classmethod
    def from_lux(cls, lux: int) -> LightCondition:
        if lux < LOW_LIGHT_THRESHOLD:
            return cls.LOW
        if lux < MODERATE_LIGHT_THRESHOLD:
            return cls.MODERATE
        return cls.HIGH


_CONDITION_LABELS = {
    LightCondition.LOW: "baixa luz",
    LightCondition.MODERATE: "luz moderada",
    LightCondition.HIGH: "alta luz",
}


class FrameObservation(BaseModel):
    """A single simulated capture.

    The object label is drawn independently of the light level; the
    recognizer never looks at the frame it is given.
    """

    model_config = ConfigDict(frozen=True)

    frame_id: int = Field(ge=1000, le=9999, description="Random frame identifier")
    light_level: int = Field(ge=0, le=999, description="Simulated lux reading")
    object_label: str = Field(description="Label picked by the simulated recognizer")
    light_condition: LightCondition
    timestamp: datetime = Field(default_factory=datetime.now)

    def capture_line(self) -> str:
        return format_capture_line(self.frame_id, self.light_level)

    def interpretation_line(self) -> str:
        return (
            f"[EYES] Interpretação IA → "
            f"{format_analysis(self.object_label, self.light_condition)}"
        )


def format_capture_line(frame_id: int, light_level: int) -> str:
    return f"[EYES] Captura de quadro #{frame_id} | Luminosidade={light_level} lux"


def format_analysis(object_label: str, condition: LightCondition) -> str:
    return f"Objeto: {object_label} | Condição: {condition.label}"
