"""Bike rental system: entities, in-memory collections, use-case controls and a command-file runner."""

__version__ = "1.0.0"
__all__ = ["cli", "controls", "models", "repositories"]