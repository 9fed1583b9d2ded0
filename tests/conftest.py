"""Shared test helpers."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from dishka import AsyncContainer
from fastapi.testclient import TestClient

from discuss.domain.model import Comment, Post, Topic, User
from discuss.domain.repository import (
    CommentRepository,
    PostRepository,
    TopicRepository,
    UserRepository,
)
from discuss.domain.service import JWTService
from discuss.domain.value import CommentId, PostId, TopicId, TopicSlug, UserId
from discuss.interface.api.app import create_app
from tests.di import build_test_container

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def make_comment(
    post_id: PostId,
    parent_id: CommentId | None = None,
    minutes: int = 0,
    content: str = "A comment",
) -> Comment:
    """Build a comment ``minutes`` after BASE_TIME without storing it."""
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id,
        author_id=UserId(uuid4()),
        content=content,
        parent_id=parent_id,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )


async def add_user(env: AsyncContainer, name: str = "Alice") -> tuple[User, str]:
    """Store a user and return it with a valid session token."""
    user = await (await env.get(UserRepository)).save(
        User(id=UserId(uuid4()), name=name, image="https://example.com/a.png")
    )
    token = (await env.get(JWTService)).create_token(str(user.id), user.name)
    return user, token


async def add_topic(
    env: AsyncContainer, slug: str = "python", description: str = "All about Python"
) -> Topic:
    """Store a topic."""
    return await (await env.get(TopicRepository)).save(
        Topic(id=TopicId(uuid4()), slug=TopicSlug(slug), description=description)
    )


async def add_post(
    env: AsyncContainer,
    topic: Topic,
    author: User,
    title: str = "Hello world",
    content: str = "Some meaningful content",
    minutes: int = 0,
) -> Post:
    """Store a post created ``minutes`` after BASE_TIME."""
    created = BASE_TIME + timedelta(minutes=minutes)
    return await (await env.get(PostRepository)).save(
        Post(
            id=PostId(uuid4()),
            topic_id=topic.id,
            author_id=author.id,
            author_name=author.name,
            title=title,
            content=content,
            created_at=created,
            updated_at=created,
        )
    )


async def add_comment(
    env: AsyncContainer,
    post: Post,
    parent: Comment | None = None,
    minutes: int = 0,
) -> Comment:
    """Store a comment on a post."""
    comment = make_comment(
        post.id, parent_id=parent.id if parent else None, minutes=minutes
    )
    return await (await env.get(CommentRepository)).save(comment)


def sign_in(client: TestClient, login: str = "alice") -> None:
    """Sign in through the mock GitHub callback; the cookie stays on the client."""
    response = client.get(
        "/auth/callback/github",
        params={"code": login, "state": "state"},
        follow_redirects=False,
    )
    assert response.status_code == 302
    assert "auth_token" in client.cookies


@pytest.fixture
def client():
    """Test client for the full app over a fresh all-mock container."""
    return TestClient(create_app(container=build_test_container()))
