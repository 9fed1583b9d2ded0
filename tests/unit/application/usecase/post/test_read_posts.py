"""Unit tests for the post read use cases."""

from uuid import uuid4

import pytest

from discuss.application.usecase.post import (
    GetPostRequest,
    GetPostUseCase,
    ListTopPostsUseCase,
    ListUserPostsRequest,
    ListUserPostsUseCase,
    SearchPostsRequest,
    SearchPostsUseCase,
)
from discuss.domain.error import NotFoundError
from tests.conftest import add_comment, add_post, add_topic, add_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetPostUseCase:
    """Tests for GetPostUseCase."""

    @pytest.mark.asyncio
    async def test_post_with_topic_and_count(self, unit_env):
        topic = await add_topic(unit_env, slug="python")
        author, _ = await add_user(unit_env, name="Alice")
        post = await add_post(unit_env, topic, author)
        await add_comment(unit_env, post)
        await add_comment(unit_env, post, minutes=1)

        item = await (await unit_env.get(GetPostUseCase)).execute(
            GetPostRequest(post_id=post.id)
        )

        assert item.post_id == str(post.id)
        assert item.topic_slug == "python"
        assert item.author_name == "Alice"
        assert item.comment_count == 2

    @pytest.mark.asyncio
    async def test_missing_post_raises(self, unit_env):
        use_case = await unit_env.get(GetPostUseCase)
        with pytest.raises(NotFoundError):
            await use_case.execute(GetPostRequest(post_id=uuid4()))


class TestListTopPostsUseCase:
    """Tests for ListTopPostsUseCase."""

    @pytest.mark.asyncio
    async def test_most_commented_first_then_newest(self, unit_env):
        topic = await add_topic(unit_env)
        author, _ = await add_user(unit_env)
        quiet_old = await add_post(unit_env, topic, author, title="Quiet old", minutes=0)
        busy = await add_post(unit_env, topic, author, title="Busy one", minutes=1)
        quiet_new = await add_post(unit_env, topic, author, title="Quiet new", minutes=2)
        for i in range(3):
            await add_comment(unit_env, busy, minutes=i)

        response = await (await unit_env.get(ListTopPostsUseCase)).execute()

        assert [p.post_id for p in response.posts] == [
            str(busy.id),
            str(quiet_new.id),
            str(quiet_old.id),
        ]
        assert response.posts[0].comment_count == 3

    @pytest.mark.asyncio
    async def test_limited_to_five(self, unit_env):
        topic = await add_topic(unit_env)
        author, _ = await add_user(unit_env)
        for i in range(7):
            await add_post(unit_env, topic, author, title=f"Post {i}", minutes=i)

        response = await (await unit_env.get(ListTopPostsUseCase)).execute()

        assert response.total == 5


class TestSearchPostsUseCase:
    """Tests for SearchPostsUseCase."""

    @pytest.mark.asyncio
    async def test_matches_title_or_content(self, unit_env):
        topic = await add_topic(unit_env)
        author, _ = await add_user(unit_env)
        by_title = await add_post(
            unit_env, topic, author, title="Asyncio tips", content="Plain body text"
        )
        by_content = await add_post(
            unit_env,
            topic,
            author,
            title="Other",
            content="Notes on asyncio queues",
            minutes=1,
        )
        await add_post(unit_env, topic, author, title="Unrelated", minutes=2)

        response = await (await unit_env.get(SearchPostsUseCase)).execute(
            SearchPostsRequest(term="syncio")
        )

        assert [p.post_id for p in response.posts] == [
            str(by_content.id),
            str(by_title.id),
        ]

    @pytest.mark.asyncio
    async def test_blank_term_matches_nothing(self, unit_env):
        topic = await add_topic(unit_env)
        author, _ = await add_user(unit_env)
        await add_post(unit_env, topic, author)

        response = await (await unit_env.get(SearchPostsUseCase)).execute(
            SearchPostsRequest(term="   ")
        )

        assert response.posts == []
        assert response.total == 0


class TestListUserPostsUseCase:
    """Tests for ListUserPostsUseCase."""

    @pytest.mark.asyncio
    async def test_own_posts_newest_first_with_counts(self, unit_env):
        python = await add_topic(unit_env, slug="python")
        rust = await add_topic(unit_env, slug="rust")
        alice, token = await add_user(unit_env, name="Alice")
        bob, _ = await add_user(unit_env, name="Bob")
        older = await add_post(unit_env, python, alice, title="Older", minutes=0)
        await add_post(unit_env, python, bob, title="Not mine", minutes=1)
        newer = await add_post(unit_env, rust, alice, title="Newer", minutes=2)
        await add_comment(unit_env, older)

        response = await (await unit_env.get(ListUserPostsUseCase)).execute(
            ListUserPostsRequest(token=token)
        )

        assert response.total == 2
        assert [p.post_id for p in response.posts] == [str(newer.id), str(older.id)]
        assert [p.topic_slug for p in response.posts] == ["rust", "python"]
        assert [p.comment_count for p in response.posts] == [0, 1]

    @pytest.mark.asyncio
    async def test_user_without_posts(self, unit_env):
        _, token = await add_user(unit_env)

        response = await (await unit_env.get(ListUserPostsUseCase)).execute(
            ListUserPostsRequest(token=token)
        )

        assert response.posts == []
        assert response.total == 0

    @pytest.mark.asyncio
    async def test_anonymous_gets_none(self, unit_env):
        use_case = await unit_env.get(ListUserPostsUseCase)

        assert await use_case.execute(ListUserPostsRequest()) is None
        assert await use_case.execute(ListUserPostsRequest(token="not-a-jwt")) is None
