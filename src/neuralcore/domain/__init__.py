"""Domain models for neuralcore.

This package contains the core data structures and enumerations shared
by the debug service and the vision simulator. All models use Pydantic
v2 for validation.
"""

from neuralcore.domain.models import (
    OBJECT_LABELS,
    FrameObservation,
    LightCondition,
    ServiceState,
    ServiceStatus,
)

__all__ = [
    "OBJECT_LABELS",
    "FrameObservation",
    "LightCondition",
    "ServiceState",
    "ServiceStatus",
]
