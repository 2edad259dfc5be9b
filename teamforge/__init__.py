"""Scrum team formation and optimization service."""

__version__ = "0.1.0"
