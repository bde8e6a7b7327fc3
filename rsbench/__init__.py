"""Windowed multipole cross-section lookup benchmark with an event-based kernel."""

__version__ = "13.0.0"