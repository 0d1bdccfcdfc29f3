"""Neural debug service module for neuralcore.

Provides the status/command/log service and its transports.

Public API:
    DebugInterface -- Abstract base class for the three operations
    NeuralDebugService -- In-process implementation
    HttpDebugClient -- HTTP client implementation
"""

from neuralcore.debug.base import DebugInterface
from neuralcore.debug.service import NeuralDebugService

__all__ = ["DebugInterface", "NeuralDebugService", "HttpDebugClient", "DebugClientError"]


def __getattr__(name: str) -> type:
    """Lazy import for transports that require external deps."""
    if name in ("HttpDebugClient", "DebugClientError"):
        from neuralcore.debug import client
        return getattr(client, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
