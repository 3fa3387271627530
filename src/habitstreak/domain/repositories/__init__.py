"""Repository protocols."""

from .kv import KeyValueStore

__all__ = ["KeyValueStore"]
