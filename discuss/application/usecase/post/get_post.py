"""Get post use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from discuss.domain.error import NotFoundError
from discuss.domain.model import PostSummary
from discuss.domain.service import PostService
from discuss.domain.value import PostId


class PostItem(BaseModel):
    """Post in a response."""

    post_id: str
    topic_slug: str
    author_id: str
    author_name: str | None
    title: str
    content: str
    comment_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_summary(cls, summary: PostSummary) -> "PostItem":
        post = summary.post
        return cls(
            post_id=str(post.id),
            topic_slug=summary.topic_slug.root,
            author_id=str(post.author_id),
            author_name=post.author_name,
            title=post.title,
            content=post.content,
            comment_count=summary.comment_count,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: UUID


class GetPostUseCase:
    """Use case for the post page."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostItem:
        """Load a post with its topic slug and comment count.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        summary = await self.post_service.get_post_summary(PostId(request.post_id))
        if not summary:
            raise NotFoundError("Post", str(request.post_id))
        return PostItem.from_summary(summary)
