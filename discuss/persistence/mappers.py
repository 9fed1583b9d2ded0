"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from discuss.domain.model import (
    Comment,
    Post,
    PostSummary,
    Topic,
    User,
    UserIdentity,
)
from discuss.domain.value import (
    AuthProvider,
    CommentId,
    PostId,
    TopicId,
    TopicSlug,
    UserId,
    UserIdentityId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        name=row.get("name"),
        email=row.get("email"),
        image=row.get("image"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_user_identity(row: Dict[str, Any]) -> UserIdentity:
    """Convert database row to UserIdentity domain model."""
    return UserIdentity(
        id=UserIdentityId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        provider=AuthProvider(row["provider"]),
        provider_user_id=row["provider_user_id"],
        provider_login=row["provider_login"],
        created_at=row["created_at"],
        last_login_at=row.get("last_login_at"),
    )


def user_identity_to_dict(identity: UserIdentity) -> Dict[str, Any]:
    """Convert UserIdentity domain model to database dict."""
    identity_dict = identity.model_dump()
    identity_dict["provider"] = identity.provider.value
    return identity_dict


def row_to_topic(row: Dict[str, Any]) -> Topic:
    """Convert database row to Topic domain model."""
    return Topic(
        id=TopicId(_uuid(row["id"])),
        slug=TopicSlug(row["slug"]),
        description=row["description"],
        created_at=row["created_at"],
    )


def topic_to_dict(topic: Topic) -> Dict[str, Any]:
    """Convert Topic domain model to database dict.

    ``model_dump`` unwraps the slug to its string.
    """
    return topic.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(_uuid(row["id"])),
        topic_id=TopicId(_uuid(row["topic_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_name=row.get("author_name"),
        title=row["title"],
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_post_summary(row: Dict[str, Any]) -> PostSummary:
    """Convert a post row joined with its topic slug and comment count."""
    return PostSummary(
        post=row_to_post(row),
        topic_slug=TopicSlug(row["topic_slug"]),
        comment_count=row.get("comment_count") or 0,
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_name=row.get("author_name"),
        author_image=row.get("author_image"),
        content=row["content"],
        parent_id=CommentId(_uuid(parent_id)) if parent_id else None,
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()
