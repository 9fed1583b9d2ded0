"""In-process cache of rendered views, keyed by path."""

from typing import Any, Optional

import logfire

from discuss.application.invalidation import ViewInvalidator


class InMemoryViewCache(ViewInvalidator):
    """Holds rendered views until a mutation invalidates their path."""

    def __init__(self) -> None:
        self._views: dict[str, Any] = {}

    def get(self, path: str) -> Optional[Any]:
        """Cached view for ``path``, or None."""
        return self._views.get(path)

    def put(self, path: str, view: Any) -> None:
        """Cache the view rendered for ``path``."""
        self._views[path] = view

    def invalidate(self, path: str) -> None:
        """Drop the cached view for ``path``, if any."""
        dropped = self._views.pop(path, None) is not None
        logfire.debug("View invalidated", path=path, dropped=dropped)


class PendingInvalidations(ViewInvalidator):
    """Collects the paths a request invalidates until its writes are committed.

    Nothing reaches the cache before ``commit``; ``discard`` forgets the
    collected paths, so a rolled back request leaves every view in place.
    """

    def __init__(self, cache: InMemoryViewCache) -> None:
        self._cache = cache
        self._paths: list[str] = []

    @property
    def paths(self) -> list[str]:
        """Paths collected and not yet flushed."""
        return list(self._paths)

    def invalidate(self, path: str) -> None:
        if path not in self._paths:
            self._paths.append(path)

    def commit(self) -> None:
        """Flush the collected paths to the cache."""
        paths, self._paths = self._paths, []
        for path in paths:
            self._cache.invalidate(path)

    def discard(self) -> None:
        """Drop the collected paths without touching the cache."""
        if self._paths:
            logfire.debug("Invalidations discarded", paths=self._paths)
        self._paths = []
