"""Frame-deterministic animation computation engine."""

__version__ = "0.1.0"
