"""Biathlon competition event processing and result reporting."""

__version__ = "0.1.0"
__all__ = ["__version__"]