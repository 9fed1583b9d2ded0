"""View invalidation port.

Mutations mark the rendered views they made stale. Adapters decide what
"stale" means (drop a cache entry, purge a CDN path, ...).
"""

from abc import ABC, abstractmethod


class ViewInvalidator(ABC):
    """Marks rendered views as stale by path."""

    @abstractmethod
    def invalidate(self, path: str) -> None:
        """Mark the view at ``path`` as stale."""
        pass
