"""Entities, filter identifiers, query parameters, repositories and domain errors for data layers."""

__version__ = "0.1.0"

__all__ = ["__version__"]