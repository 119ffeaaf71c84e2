"""Threaded simulation of the dining philosophers problem: settings, table and command."""

__version__ = "0.1.0"
__all__ = ["cli", "settings", "simulation"]