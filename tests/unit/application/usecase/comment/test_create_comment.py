"""Unit tests for CreateCommentUseCase."""

from typing import Optional
from uuid import uuid4

import pytest

from discuss.adapter.cache import InMemoryViewCache, PendingInvalidations
from discuss.application.usecase.base import FORM_ERROR, FailureKind
from discuss.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from discuss.domain.error import StorageError
from discuss.domain.model import Comment
from discuss.domain.repository import CommentRepository
from discuss.domain.service import CommentService, PostService, SessionService
from discuss.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import add_comment, add_post, add_topic, add_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class FailingCommentRepository(InMemoryCommentRepository):
    """Comment repository whose inserts always fail."""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__()
        self.message = message

    async def save(self, comment: Comment) -> Comment:
        raise StorageError(self.message) if self.message else StorageError()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_top_level_comment(self, unit_env):
        """A comment should be stored and its post and topic pages invalidated."""
        # Arrange
        topic = await add_topic(unit_env, slug="python")
        author, _ = await add_user(unit_env, name="Alice")
        commenter, token = await add_user(unit_env, name="Bob")
        post = await add_post(unit_env, topic, author)
        path = f"/topic/python/posts/{post.id}"
        cache = await unit_env.get(InMemoryViewCache)
        cache.put(path, {"comments": []})
        use_case = await unit_env.get(CreateCommentUseCase)

        # Act
        result = await use_case.execute(
            CreateCommentRequest(
                auth_token=token, post_id=post.id, form={"content": "Nice post"}
            )
        )

        # Assert
        assert result.succeeded
        assert result.redirect_to is None
        assert result.invalidated == [path, "/topic/python"]
        assert (await unit_env.get(PendingInvalidations)).paths == result.invalidated

        comments = await (await unit_env.get(CommentRepository)).find_by_post(post.id)
        assert len(comments) == 1
        assert comments[0].author_id == commenter.id
        assert comments[0].author_name == "Bob"
        assert comments[0].author_image == commenter.image
        assert comments[0].parent_id is None

    @pytest.mark.asyncio
    async def test_reply_to_comment(self, unit_env):
        topic = await add_topic(unit_env)
        author, token = await add_user(unit_env)
        post = await add_post(unit_env, topic, author)
        parent = await add_comment(unit_env, post)
        use_case = await unit_env.get(CreateCommentUseCase)

        result = await use_case.execute(
            CreateCommentRequest(
                auth_token=token,
                post_id=post.id,
                form={"content": "I agree", "parent_id": str(parent.id)},
            )
        )

        assert result.succeeded
        comments = await (await unit_env.get(CommentRepository)).find_by_post(post.id)
        reply = next(c for c in comments if c.id != parent.id)
        assert reply.parent_id == parent.id

    @pytest.mark.asyncio
    async def test_short_content(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        result = await use_case.execute(
            CreateCommentRequest(post_id=uuid4(), form={"content": "hi"})
        )

        assert result.failure == FailureKind.VALIDATION
        assert list(result.errors) == ["content"]

    @pytest.mark.asyncio
    async def test_anonymous_user_is_rejected(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        result = await use_case.execute(
            CreateCommentRequest(post_id=uuid4(), form={"content": "Nice post"})
        )

        assert result.errors == {
            FORM_ERROR: ["You have to login first to reply comment"]
        }

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        _, token = await add_user(unit_env)
        use_case = await unit_env.get(CreateCommentUseCase)

        result = await use_case.execute(
            CreateCommentRequest(
                auth_token=token, post_id=uuid4(), form={"content": "Nice post"}
            )
        )

        assert result.failure == FailureKind.NOT_FOUND
        assert result.errors == {FORM_ERROR: ["Post not found"]}

    @pytest.mark.asyncio
    async def test_missing_parent(self, unit_env):
        topic = await add_topic(unit_env)
        author, token = await add_user(unit_env)
        post = await add_post(unit_env, topic, author)
        use_case = await unit_env.get(CreateCommentUseCase)

        result = await use_case.execute(
            CreateCommentRequest(
                auth_token=token,
                post_id=post.id,
                form={"content": "Nice post", "parent_id": str(uuid4())},
            )
        )

        assert result.failure == FailureKind.NOT_FOUND
        assert result.errors == {FORM_ERROR: ["Parent comment not found"]}

    @pytest.mark.asyncio
    async def test_parent_from_another_post(self, unit_env):
        """Replies can't cross posts, so every thread stays inside its post."""
        topic = await add_topic(unit_env)
        author, token = await add_user(unit_env)
        post = await add_post(unit_env, topic, author)
        other = await add_post(unit_env, topic, author, title="Other post")
        foreign = await add_comment(unit_env, other)
        use_case = await unit_env.get(CreateCommentUseCase)

        result = await use_case.execute(
            CreateCommentRequest(
                auth_token=token,
                post_id=post.id,
                form={"content": "Nice post", "parent_id": str(foreign.id)},
            )
        )

        assert result.failure == FailureKind.VALIDATION
        assert await (await unit_env.get(CommentRepository)).find_by_post(post.id) == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "message, expected",
        [("insert rejected", "insert rejected"), (None, "Failed to reply comment")],
    )
    async def test_storage_failure(self, unit_env, message, expected):
        topic = await add_topic(unit_env)
        author, token = await add_user(unit_env)
        post = await add_post(unit_env, topic, author)
        use_case = CreateCommentUseCase(
            session_service=await unit_env.get(SessionService),
            invalidator=await unit_env.get(PendingInvalidations),
            post_service=await unit_env.get(PostService),
            comment_service=CommentService(FailingCommentRepository(message)),
        )

        result = await use_case.execute(
            CreateCommentRequest(
                auth_token=token, post_id=post.id, form={"content": "Nice post"}
            )
        )

        assert result.failure == FailureKind.STORAGE
        assert result.errors == {FORM_ERROR: [expected]}
        assert result.invalidated == []
        assert (await unit_env.get(PendingInvalidations)).paths == []
        assert await (await unit_env.get(CommentRepository)).find_by_post(post.id) == []
