"""Notebox — personal notes organized into color-tagged categories."""

__version__ = "1.0.0"
