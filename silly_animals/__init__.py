"""Silly Animals: a turn-based creature battle simulator."""

__version__ = "0.1.0"
