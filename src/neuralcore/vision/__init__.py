"""Simulated vision module for neuralcore.

Public API:
    VisionLoop -- Fixed-count capture loop with boundary-checked stop
    FrameInterpreter -- Random object "recognizer"
    LightSensor / SimulatedLightSensor -- Lux readings
    Sampler / RandomSampler -- Injectable randomness
"""

from neuralcore.vision.interpreter import FrameInterpreter
from neuralcore.vision.loop import CancellationToken, VisionLoop
from neuralcore.vision.sampler import RandomSampler, Sampler
from neuralcore.vision.sensor import LightSensor, SimulatedLightSensor

__all__ = [
    "CancellationToken",
    "FrameInterpreter",
    "LightSensor",
    "RandomSampler",
    "Sampler",
    "SimulatedLightSensor",
    "VisionLoop",
]
