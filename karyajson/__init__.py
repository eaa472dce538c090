"""Strict JSON parsing and compact JSON serialization with typed errors."""

__version__ = "0.0.1"
__all__ = ["errors", "encoder", "parser"]