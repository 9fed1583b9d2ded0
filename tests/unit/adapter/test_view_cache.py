"""Unit tests for the view cache and request invalidations."""

from discuss.adapter.cache import InMemoryViewCache, PendingInvalidations


class TestInMemoryViewCache:
    """Tests for InMemoryViewCache."""

    def test_put_and_get(self):
        cache = InMemoryViewCache()
        cache.put("/", {"topics": []})
        assert cache.get("/") == {"topics": []}

    def test_invalidate_drops_only_that_path(self):
        cache = InMemoryViewCache()
        cache.put("/", "home")
        cache.put("/topic/python", "topic")

        cache.invalidate("/topic/python")

        assert cache.get("/topic/python") is None
        assert cache.get("/") == "home"

    def test_invalidate_unknown_path_is_noop(self):
        cache = InMemoryViewCache()
        cache.invalidate("/never-rendered")
        assert cache.get("/never-rendered") is None


class TestPendingInvalidations:
    """Tests for PendingInvalidations."""

    def test_paths_wait_for_commit(self):
        cache = InMemoryViewCache()
        cache.put("/", "home")
        pending = PendingInvalidations(cache)

        pending.invalidate("/")

        assert cache.get("/") == "home"
        assert pending.paths == ["/"]

    def test_commit_flushes_and_clears(self):
        cache = InMemoryViewCache()
        cache.put("/", "home")
        cache.put("/topic/python", "topic")
        pending = PendingInvalidations(cache)
        pending.invalidate("/")
        pending.invalidate("/topic/python")
        pending.invalidate("/")

        pending.commit()

        assert cache.get("/") is None
        assert cache.get("/topic/python") is None
        assert pending.paths == []

    def test_discard_keeps_views(self):
        cache = InMemoryViewCache()
        cache.put("/", "home")
        pending = PendingInvalidations(cache)
        pending.invalidate("/")

        pending.discard()
        pending.commit()

        assert cache.get("/") == "home"
