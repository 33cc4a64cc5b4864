"""Run configurations bound to project modules."""

__version__ = "0.1.0"
