"""Unit tests for the topic read use cases."""

import pytest

from discuss.application.usecase.topic import (
    GetTopicRequest,
    GetTopicUseCase,
    ListTopicsUseCase,
)
from discuss.domain.error import NotFoundError
from tests.conftest import add_comment, add_post, add_topic, add_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListTopicsUseCase:
    """Tests for ListTopicsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_all_topics(self, unit_env):
        await add_topic(unit_env, slug="python")
        await add_topic(unit_env, slug="rust")
        use_case = await unit_env.get(ListTopicsUseCase)

        response = await use_case.execute()

        assert response.total == 2
        assert {t.slug for t in response.topics} == {"python", "rust"}

    @pytest.mark.asyncio
    async def test_empty(self, unit_env):
        response = await (await unit_env.get(ListTopicsUseCase)).execute()
        assert response.topics == []
        assert response.total == 0


class TestGetTopicUseCase:
    """Tests for GetTopicUseCase."""

    @pytest.mark.asyncio
    async def test_topic_with_posts_newest_first(self, unit_env):
        topic = await add_topic(unit_env, slug="python")
        other = await add_topic(unit_env, slug="rust")
        author, _ = await add_user(unit_env)
        old = await add_post(unit_env, topic, author, title="Old post", minutes=0)
        new = await add_post(unit_env, topic, author, title="New post", minutes=5)
        await add_post(unit_env, other, author, title="Elsewhere", minutes=9)
        await add_comment(unit_env, old)

        response = await (await unit_env.get(GetTopicUseCase)).execute(
            GetTopicRequest(slug="python")
        )

        assert response.topic.slug == "python"
        assert [p.post_id for p in response.posts] == [str(new.id), str(old.id)]
        assert response.posts[1].comment_count == 1

    @pytest.mark.asyncio
    async def test_unknown_topic_raises(self, unit_env):
        use_case = await unit_env.get(GetTopicUseCase)
        with pytest.raises(NotFoundError):
            await use_case.execute(GetTopicRequest(slug="missing"))

    @pytest.mark.asyncio
    async def test_malformed_slug_is_not_found(self, unit_env):
        use_case = await unit_env.get(GetTopicUseCase)
        with pytest.raises(NotFoundError):
            await use_case.execute(GetTopicRequest(slug="Not A Slug"))
