"""Abstract interface for the neural debug service.

The debug service exposes exactly three operations. Any transport (an
in-process call, an HTTP handler, an HTTP client) implements this
interface so callers never depend on how the operations are delivered.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class DebugInterface(ABC):
    """The three operations answered by a neural debug service.

    Example usage::

        with HttpDebugClient(base_url="http://localhost:8090") as core:
            print(core.get_system_status())
            print(core.run_command("ping"))
            core.log_message("boot", "sensors online")
    """

    @abstractmethod
    def get_system_status(self) -> str:
        """Return the uptime/status report string."""
        ...

    @abstractmethod
    def run_command(self, command: str) -> str:
        """Run a named command and return its text response.

        Unknown commands are answered with a normal response echoing
        the command; they never raise.
        """
        ...

    @abstractmethod
    def log_message(self, tag: str, message: str) -> None:
        """Emit a tagged, timestamped line to the service's log sink."""
        ...
