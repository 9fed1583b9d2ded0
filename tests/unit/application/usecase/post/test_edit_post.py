"""Unit tests for EditPostUseCase."""

from typing import Optional
from uuid import uuid4

import pytest

from discuss.adapter.cache import PendingInvalidations
from discuss.application.usecase.base import FORM_ERROR, FailureKind
from discuss.application.usecase.post import EditPostRequest, EditPostUseCase
from discuss.domain.error import StorageError
from discuss.domain.model import Post
from discuss.domain.repository import CommentRepository, PostRepository, TopicRepository
from discuss.domain.service import PostService, SessionService
from discuss.domain.value import PostId
from discuss.persistence.repository.inmemory import InMemoryPostRepository
from tests.conftest import add_post, add_topic, add_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

NEW_FORM = {"title": "Edited title", "content": "Edited content body"}


class FailingUpdatePostRepository(InMemoryPostRepository):
    """Post repository whose updates always fail."""

    def __init__(self, topics, comments, message: Optional[str] = None) -> None:
        super().__init__(topics, comments)
        self.message = message

    async def update_content(
        self, post_id: PostId, title: str, content: str
    ) -> Optional[Post]:
        raise StorageError(self.message) if self.message else StorageError()


class VanishingPostRepository(InMemoryPostRepository):
    """Post repository where the post is deleted just before its update."""

    async def update_content(
        self, post_id: PostId, title: str, content: str
    ) -> Optional[Post]:
        await self.delete(post_id)
        return await super().update_content(post_id, title, content)


async def _use_case_over(env, repository: InMemoryPostRepository, post: Post):
    """Edit use case backed by ``repository``, which is seeded with ``post``."""
    await repository.save(post)
    return EditPostUseCase(
        session_service=await env.get(SessionService),
        invalidator=await env.get(PendingInvalidations),
        post_service=PostService(repository, await env.get(CommentRepository)),
    )


class TestEditPostUseCase:
    """Tests for EditPostUseCase."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        """Editing should replace title and content and redirect to the post."""
        # Arrange
        topic = await add_topic(unit_env, slug="python")
        author, token = await add_user(unit_env)
        post = await add_post(unit_env, topic, author)
        use_case = await unit_env.get(EditPostUseCase)

        # Act
        result = await use_case.execute(
            EditPostRequest(auth_token=token, post_id=post.id, form=NEW_FORM)
        )

        # Assert
        path = f"/topic/python/posts/{post.id}"
        assert result.succeeded
        assert result.redirect_to == path
        assert result.invalidated == [path, "/topic/python"]

        stored = await (await unit_env.get(PostRepository)).find_by_id(post.id)
        assert stored.title == "Edited title"
        assert stored.content == "Edited content body"
        assert stored.updated_at > post.updated_at

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        topic = await add_topic(unit_env)
        author, _ = await add_user(unit_env, name="Alice")
        _, intruder_token = await add_user(unit_env, name="Mallory")
        post = await add_post(unit_env, topic, author)
        use_case = await unit_env.get(EditPostUseCase)

        result = await use_case.execute(
            EditPostRequest(auth_token=intruder_token, post_id=post.id, form=NEW_FORM)
        )

        assert result.failure == FailureKind.UNAUTHORIZED
        assert result.errors == {FORM_ERROR: ["You can only edit your own posts"]}
        stored = await (await unit_env.get(PostRepository)).find_by_id(post.id)
        assert stored.title == post.title

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        _, token = await add_user(unit_env)
        use_case = await unit_env.get(EditPostUseCase)

        result = await use_case.execute(
            EditPostRequest(auth_token=token, post_id=uuid4(), form=NEW_FORM)
        )

        assert result.failure == FailureKind.NOT_FOUND
        assert result.errors == {FORM_ERROR: ["Post not found"]}

    @pytest.mark.asyncio
    async def test_anonymous_user_is_rejected(self, unit_env):
        use_case = await unit_env.get(EditPostUseCase)

        result = await use_case.execute(
            EditPostRequest(post_id=uuid4(), form=NEW_FORM)
        )

        assert result.errors == {FORM_ERROR: ["You must be logged in to edit posts"]}

    @pytest.mark.asyncio
    async def test_invalid_form(self, unit_env):
        use_case = await unit_env.get(EditPostUseCase)

        result = await use_case.execute(
            EditPostRequest(post_id=uuid4(), form={"title": "ok title"})
        )

        assert result.failure == FailureKind.VALIDATION
        assert "content" in result.errors

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "message, expected",
        [("update rejected", "update rejected"), (None, "Failed to update post.")],
    )
    async def test_storage_failure(self, unit_env, message, expected):
        topic = await add_topic(unit_env)
        author, token = await add_user(unit_env)
        post = await add_post(unit_env, topic, author)
        repository = FailingUpdatePostRepository(
            await unit_env.get(TopicRepository),
            await unit_env.get(CommentRepository),
            message,
        )
        use_case = await _use_case_over(unit_env, repository, post)

        result = await use_case.execute(
            EditPostRequest(auth_token=token, post_id=post.id, form=NEW_FORM)
        )

        assert result.failure == FailureKind.STORAGE
        assert result.errors == {FORM_ERROR: [expected]}
        assert result.redirect_to is None
        assert result.invalidated == []
        assert (await unit_env.get(PendingInvalidations)).paths == []

    @pytest.mark.asyncio
    async def test_post_deleted_before_update(self, unit_env):
        """A post removed after the ownership check is a storage failure."""
        topic = await add_topic(unit_env)
        author, token = await add_user(unit_env)
        post = await add_post(unit_env, topic, author)
        repository = VanishingPostRepository(
            await unit_env.get(TopicRepository), await unit_env.get(CommentRepository)
        )
        use_case = await _use_case_over(unit_env, repository, post)

        result = await use_case.execute(
            EditPostRequest(auth_token=token, post_id=post.id, form=NEW_FORM)
        )

        assert result.failure == FailureKind.STORAGE
        assert result.errors == {FORM_ERROR: ["Post not found"]}
        assert result.invalidated == []
        assert await repository.find_by_id(post.id) is None
