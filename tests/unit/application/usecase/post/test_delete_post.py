"""Unit tests for DeletePostUseCase."""

from typing import Optional
from uuid import uuid4

import pytest

from discuss.adapter.cache import InMemoryViewCache, PendingInvalidations
from discuss.application.usecase.base import FORM_ERROR, FailureKind
from discuss.application.usecase.post import DeletePostRequest, DeletePostUseCase
from discuss.domain.error import StorageError
from discuss.domain.repository import CommentRepository, PostRepository, TopicRepository
from discuss.domain.service import PostService, SessionService
from discuss.domain.value import PostId
from discuss.persistence.repository.inmemory import InMemoryPostRepository
from tests.conftest import add_comment, add_post, add_topic, add_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class FailingDeletePostRepository(InMemoryPostRepository):
    """Post repository whose deletes always fail."""

    def __init__(self, topics, comments, message: Optional[str] = None) -> None:
        super().__init__(topics, comments)
        self.message = message

    async def delete(self, post_id: PostId) -> None:
        raise StorageError(self.message) if self.message else StorageError()


class TestDeletePostUseCase:
    """Tests for DeletePostUseCase."""

    @pytest.mark.asyncio
    async def test_delete_removes_post_and_comments(self, unit_env):
        """Deleting should remove the post with its whole comment forest."""
        # Arrange
        topic = await add_topic(unit_env, slug="python")
        author, token = await add_user(unit_env)
        post = await add_post(unit_env, topic, author)
        root = await add_comment(unit_env, post)
        await add_comment(unit_env, post, parent=root, minutes=1)
        cache = await unit_env.get(InMemoryViewCache)
        cache.put("/topic/python", {"posts": [str(post.id)]})
        use_case = await unit_env.get(DeletePostUseCase)

        # Act
        result = await use_case.execute(
            DeletePostRequest(auth_token=token, post_id=post.id)
        )

        # Assert
        assert result.succeeded
        assert result.redirect_to == "/topic/python"
        assert result.invalidated == [
            "/topic/python",
            f"/topic/python/posts/{post.id}",
        ]
        assert (await unit_env.get(PendingInvalidations)).paths == result.invalidated
        assert await (await unit_env.get(PostRepository)).find_by_id(post.id) is None
        assert await (await unit_env.get(CommentRepository)).find_by_post(post.id) == []

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        topic = await add_topic(unit_env)
        author, _ = await add_user(unit_env, name="Alice")
        _, intruder_token = await add_user(unit_env, name="Mallory")
        post = await add_post(unit_env, topic, author)
        use_case = await unit_env.get(DeletePostUseCase)

        result = await use_case.execute(
            DeletePostRequest(auth_token=intruder_token, post_id=post.id)
        )

        assert result.failure == FailureKind.UNAUTHORIZED
        assert result.errors == {FORM_ERROR: ["You can only delete your own posts"]}
        assert await (await unit_env.get(PostRepository)).find_by_id(post.id)

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        _, token = await add_user(unit_env)
        use_case = await unit_env.get(DeletePostUseCase)

        result = await use_case.execute(
            DeletePostRequest(auth_token=token, post_id=uuid4())
        )

        assert result.failure == FailureKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_anonymous_user_is_rejected(self, unit_env):
        use_case = await unit_env.get(DeletePostUseCase)

        result = await use_case.execute(DeletePostRequest(post_id=uuid4()))

        assert result.errors == {
            FORM_ERROR: ["You must be logged in to delete posts"]
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "message, expected",
        [("delete rejected", "delete rejected"), (None, "Failed to delete post")],
    )
    async def test_storage_failure(self, unit_env, message, expected):
        topic = await add_topic(unit_env)
        author, token = await add_user(unit_env)
        post = await add_post(unit_env, topic, author)
        repository = FailingDeletePostRepository(
            await unit_env.get(TopicRepository),
            await unit_env.get(CommentRepository),
            message,
        )
        await repository.save(post)
        use_case = DeletePostUseCase(
            session_service=await unit_env.get(SessionService),
            invalidator=await unit_env.get(PendingInvalidations),
            post_service=PostService(repository, await unit_env.get(CommentRepository)),
        )

        result = await use_case.execute(
            DeletePostRequest(auth_token=token, post_id=post.id)
        )

        assert result.failure == FailureKind.STORAGE
        assert result.errors == {FORM_ERROR: [expected]}
        assert result.redirect_to is None
        assert result.invalidated == []
        assert (await unit_env.get(PendingInvalidations)).paths == []
        assert await repository.find_by_id(post.id) is not None
