"""Simulated vision capture loop.

Runs a fixed number of capture iterations, each reading the simulated
light sensor, "recognizing" an object and emitting both as text lines,
with a fixed pause between iterations.

A stop request is observed at the top of the next capture, so at most
the iteration already in progress completes after :meth:`VisionLoop.stop`.
A stop arriving during the pause ends the pause early and the loop then
reaches that boundary; it is never aborted mid-frame.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

from neuralcore.domain.models import FrameObservation, format_capture_line
from neuralcore.vision.interpreter import FrameInterpreter
from neuralcore.vision.sampler import RandomSampler, Sampler
from neuralcore.vision.sensor import LightSensor, SimulatedLightSensor

logger = logging.getLogger(__name__)

START_LINE = "[EYES] Inicializando visão neural..."
SHUTDOWN_LINE = "[EYES] Encerrando visão neural."

MIN_FRAME_ID = 1000
MAX_FRAME_ID = 9999


class CancellationToken:
    """Thread-safe stop flag whose waits wake up on cancellation."""

    def __init__(self) -> None:
        self._event = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    def reset(self) -> None:
        self._event.clear()

    def wait(self, timeout: float) -> bool:
        """Sleep up to ``timeout`` seconds; return True if cancelled."""
        return self._event.wait(timeout)


class VisionLoop:
    """Drives the simulated capture -> recognize -> emit cycle."""

    def __init__(
        self,
        sensor: LightSensor | None = None,
        interpreter: FrameInterpreter | None = None,
        sampler: Sampler | None = None,
        iterations: int = 5,
        interval: float = 1.0,
        emit: Callable[[str], None] = print,
    ) -> None:
        if iterations <= 0:
            raise ValueError(f"iterations must be positive, got {iterations}")
        if interval < 0:
            raise ValueError(f"interval must be non-negative, got {interval}")
        self._sampler = sampler or RandomSampler()
        self._sensor = sensor or SimulatedLightSensor(self._sampler)
        self._interpreter = interpreter or FrameInterpreter(self._sampler)
        self._iterations = iterations
        self._interval = interval
        self._emit = emit
        self._token = CancellationToken()
        self._token.cancel()
        self._running = False

    @property
    def is_active(self) -> bool:
        """Whether frames are currently being captured (not stopped)."""
        return not self._token.cancelled

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> list[FrameObservation]:
        """Run the capture loop to completion, blocking the caller.

        Starting clears the stop flag, so a :meth:`stop` issued before this
        point (including one racing :meth:`start_background` before the
        worker reaches it) is discarded and every iteration runs.

        Returns:
            The observations captured before the loop finished or was
            stopped.
        """
        self._emit(START_LINE)
        self._token.reset()
        self._running = True
        logger.info(
            "Vision loop started (%d iterations, %.2fs interval)",
            self._iterations, self._interval,
        )
        observations: list[FrameObservation] = []
        try:
            for _ in range(self._iterations):
                obs = self.capture_frame()
                if obs is not None:
                    observations.append(obs)
                self._token.wait(self._interval)
        finally:
            self._running = False
        self._emit(SHUTDOWN_LINE)
        logger.info("Vision loop finished after %d frames", len(observations))
        return observations

    def start_background(self) -> threading.Thread:
        """Run :meth:`start` on a daemon worker thread and return the thread."""
        thread = threading.Thread(target=self.start, name="vision-loop", daemon=True)
        thread.start()
        return thread

    def stop(self) -> None:
        """Request the loop to stop at the next iteration boundary."""
        self._token.cancel()
        logger.info("Vision loop stop requested")

    def capture_frame(self) -> FrameObservation | None:
        """Capture and interpret one frame; no-op once stopped."""
        if self._token.cancelled:
            return None

        light = self._sensor.measure_light()
        frame_id = self._sampler.randint(MIN_FRAME_ID, MAX_FRAME_ID)
        frame = format_capture_line(frame_id, light)
        self._emit(frame)

        label, condition = self._interpreter.recognize(light)
        obs = FrameObservation(
            frame_id=frame_id,
            light_level=light,
            object_label=label,
            light_condition=condition,
        )
        self._emit(obs.interpretation_line())
        logger.debug("Frame #%d: lux=%d label=%s", frame_id, light, label)
        return obs
