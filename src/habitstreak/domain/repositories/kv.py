"""Key-value store protocol used for persisting the habit registry."""

from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """Minimal string key-value persistence."""

    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or ``None`` when the key was never written."""
        ...

    def set(self, key: str, value: str) -> None:
        """Write ``value`` under ``key``, replacing any previous value."""
        ...

    def delete(self, key: str) -> None:
        """Remove ``key`` if present."""
        ...
