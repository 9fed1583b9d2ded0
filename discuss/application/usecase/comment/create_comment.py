"""Create comment use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from discuss.application.invalidation import ViewInvalidator
from discuss.application.paths import post_path, topic_path
from discuss.application.usecase.base import (
    FailureKind,
    MutationRequest,
    MutationResult,
    MutationUseCase,
    Transition,
)
from discuss.domain.model import Comment, PostSummary, User
from discuss.domain.service import CommentService, PostService, SessionService
from discuss.domain.value import CommentId, PostId


class CommentForm(BaseModel):
    """Submitted comment form."""

    content: str = Field(min_length=3)
    parent_id: Optional[UUID] = None  # Comment being replied to


class CreateCommentRequest(MutationRequest):
    """Create comment request."""

    post_id: UUID


class CreateCommentUseCase(MutationUseCase):
    """Use case for commenting on a post or replying to another comment."""

    operation = "create_comment"
    form_model = CommentForm
    login_message = "You have to login first to reply comment"
    fallback_message = "Failed to reply comment"

    def __init__(
        self,
        session_service: SessionService,
        invalidator: ViewInvalidator,
        post_service: PostService,
        comment_service: CommentService,
    ) -> None:
        super().__init__(session_service, invalidator)
        self.post_service = post_service
        self.comment_service = comment_service

    async def authorize(
        self, request: CreateCommentRequest, form: CommentForm, user: User
    ) -> PostSummary | MutationResult:
        """Check the post exists and the parent, if any, is one of its comments.

        A reply can only point at a comment that already exists, so parent
        links never form a cycle.
        """
        summary = await self.post_service.get_post_summary(PostId(request.post_id))
        if not summary:
            return MutationResult.form_error(FailureKind.NOT_FOUND, "Post not found")

        if form.parent_id is not None:
            parent = await self.comment_service.get_comment_by_id(
                CommentId(form.parent_id)
            )
            if not parent:
                return MutationResult.form_error(
                    FailureKind.NOT_FOUND, "Parent comment not found"
                )
            if parent.post_id != summary.post.id:
                return MutationResult.form_error(
                    FailureKind.VALIDATION,
                    "Parent comment does not belong to this post",
                )

        return summary

    async def mutate(
        self,
        request: CreateCommentRequest,
        form: CommentForm,
        user: User,
        target: PostSummary,
    ) -> Comment:
        parent_id = CommentId(form.parent_id) if form.parent_id else None
        return await self.comment_service.create_comment(
            post_id=target.post.id,
            author=user,
            content=form.content,
            parent_id=parent_id,
        )

    def transition(self, target: PostSummary, outcome: Comment) -> Transition:
        slug = target.topic_slug.root
        # The topic page lists comment counts
        return Transition(
            invalidate=[post_path(slug, target.post.id), topic_path(slug)]
        )
