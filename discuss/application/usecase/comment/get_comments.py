"""Get comments use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from discuss.domain.error import NotFoundError
from discuss.domain.model import Comment
from discuss.domain.service import CommentService, PostService
from discuss.domain.service.comment_tree import walk_comment_tree
from discuss.domain.value import CommentId, PostId


class CommentTreeItem(BaseModel):
    """Comment placed in its thread.

    Items come in depth-first order: every comment is followed by its
    replies, each one level deeper.
    """

    comment_id: str
    post_id: str
    author_id: str
    author_name: str | None
    author_image: str | None
    content: str
    parent_id: str | None
    depth: int
    created_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment, depth: int) -> "CommentTreeItem":
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            author_name=comment.author_name,
            author_image=comment.author_image,
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            depth=depth,
            created_at=comment.created_at,
        )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: UUID
    comment_id: Optional[UUID] = None  # Only this comment's thread


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    comments: list[CommentTreeItem]
    total: int


class GetCommentsUseCase:
    """Use case for getting the comments of a post as threads."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Threads are walked depth-first, newest first at every level.

        Args:
            request: Post ID and optional comment ID to narrow to one thread

        Returns:
            Comments in thread order (or those of the single requested thread)

        Raises:
            NotFoundError: If the post, or the requested comment, doesn't exist
        """
        post_id = PostId(request.post_id)
        post = await self.post_service.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", str(request.post_id))

        comments = await self.comment_service.get_comments_for_post(post_id)

        comment_id = CommentId(request.comment_id) if request.comment_id else None
        items = [
            CommentTreeItem.from_domain(comment, depth)
            for depth, comment in walk_comment_tree(comments, comment_id)
        ]
        if comment_id is not None and not items:
            raise NotFoundError("Comment", str(comment_id))

        return GetCommentsResponse(
            post_id=str(post_id), comments=items, total=len(items)
        )
