"""In-process neural debug service.

Holds the uptime and active flag of one service instance and answers the
status/command/log operations. Each operation runs under a lock so calls
arriving from several threads behave as independent atomic units.
"""

from __future__ import annotations

import logging
import threading
import time
from datetime import datetime
from typing import Callable

from neuralcore.debug.base import DebugInterface
from neuralcore.domain.models import ServiceState, ServiceStatus

logger = logging.getLogger(__name__)

SINK_LOGGER_NAME = "neuralcore.debug.sink"

REBOOT_MESSAGE = "[NEURAL-CORE] Reinicializando sistema..."
ANALYZE_MEMORY_MESSAGE = "[NEURAL-CORE] Análise de memória: estável (uso < 35%)"
PING_MESSAGE = "[NEURAL-CORE] Pong! Conexão estável."
UNKNOWN_COMMAND_PREFIX = "[NEURAL-CORE] Comando desconhecido: "


class NeuralDebugService(DebugInterface):
    """Debug service answering status, command and log requests.

    A fresh instance starts ACTIVE. The ``reboot`` command and
    :meth:`destroy` move it to INACTIVE, and nothing moves it back; only
    a new instance starts active again.
    """

    def __init__(
        self,
        sink: logging.Logger | None = None,
        clock: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._sink = sink or logging.getLogger(SINK_LOGGER_NAME)
        self._clock = clock
        self._now = now
        self._lock = threading.Lock()
        self._state = ServiceState(started_at=clock())

    @property
    def state(self) -> ServiceState:
        with self._lock:
            return self._state.model_copy()

    @property
    def is_active(self) -> bool:
        with self._lock:
            return self._state.active

    def uptime_seconds(self) -> int:
        with self._lock:
            return self._uptime()

    def get_system_status(self) -> str:
        with self._lock:
            status = "OK" if self._state.active else "INATIVO"
            return (
                f"🧠 Linus Neural Core ativo — Uptime: {self._uptime()}s "
                f"| Status: {status}"
            )

    def run_command(self, command: str) -> str:
        logger.debug("Comando recebido: %s", command)
        with self._lock:
            token = command.lower()
            if token == "reboot":
                self._deactivate()
                return REBOOT_MESSAGE
            if token == "analyze-memory":
                return ANALYZE_MEMORY_MESSAGE
            if token == "ping":
                return PING_MESSAGE
            return UNKNOWN_COMMAND_PREFIX + command

    def log_message(self, tag: str, message: str) -> None:
        timestamp = self._now().strftime("%H:%M:%S")
        self._sink.info("[%s] %s -> %s", tag, timestamp, message)

    # -- lifecycle ---------------------------------------------------------

    def on_bind(self) -> NeuralDebugService:
        logger.info("Serviço NeuralDebugService conectado")
        return self

    def on_unbind(self) -> None:
        logger.info("Serviço NeuralDebugService desconectado")

    def destroy(self) -> None:
        """Tear the service down; the instance stays INACTIVE afterwards."""
        logger.warning("Serviço NeuralDebugService finalizado")
        with self._lock:
            self._deactivate()

    def _uptime(self) -> int:
        return max(0, int(self._clock() - self._state.started_at))

    def _deactivate(self) -> None:
        if self._state.active:
            self._state = self._state.model_copy(
                update={"status": ServiceStatus.INACTIVE}
            )
