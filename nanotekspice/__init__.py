"""Tristate logic circuits: core types, elementary parts and 4000-series chips."""

__version__ = "0.1.0"
__all__ = ["core", "elementary", "chips"]