"""View cache provider."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire

from discuss.adapter.cache import InMemoryViewCache, PendingInvalidations
from discuss.application.invalidation import ViewInvalidator
from discuss.util.di.base import ProviderBase


class ViewCacheProvider(ProviderBase):
    """Provides the process-wide view cache - concrete, no mocks needed."""

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_view_cache(self) -> InMemoryViewCache:
        """Provide the view cache."""
        return InMemoryViewCache()

    @provide(scope=Scope.REQUEST)
    async def get_pending_invalidations(
        self, cache: InMemoryViewCache
    ) -> AsyncIterator[PendingInvalidations]:
        """Provide the request's invalidations.

        Flushed to the cache when the request ends cleanly, dropped when it
        raises. The database session flushes them itself right after its
        commit.
        """
        pending = PendingInvalidations(cache)
        try:
            yield pending
            pending.commit()
        except Exception as e:
            logfire.warn("Invalidations discarded", error=str(e))
            pending.discard()
            raise

    @provide(scope=Scope.REQUEST)
    def get_view_invalidator(self, pending: PendingInvalidations) -> ViewInvalidator:
        """Expose the request's invalidations to the mutations."""
        return pending
