"""neuralcore -- Linus Neural Project debug service and vision simulator.

This package bundles two independent components: a debug status service
answering status/command/log requests (in-process or over HTTP), and a
simulated vision loop that "captures" frames with a fake light sensor and
labels them with a fake recognizer.
"""

__version__ = "0.1.0"
