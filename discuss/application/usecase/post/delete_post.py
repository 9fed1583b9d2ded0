"""Delete post use case."""

from uuid import UUID

from discuss.application.invalidation import ViewInvalidator
from discuss.application.paths import post_path, topic_path
from discuss.application.usecase.base import (
    FailureKind,
    MutationRequest,
    MutationResult,
    MutationUseCase,
    Transition,
)
from discuss.domain.model import PostSummary, User
from discuss.domain.service import PostService, SessionService
from discuss.domain.value import PostId


class DeletePostRequest(MutationRequest):
    """Delete post request. Carries no form."""

    post_id: UUID


class DeletePostUseCase(MutationUseCase):
    """Use case for an author deleting their post and its comments."""

    operation = "delete_post"
    form_model = None
    login_message = "You must be logged in to delete posts"
    fallback_message = "Failed to delete post"

    def __init__(
        self,
        session_service: SessionService,
        invalidator: ViewInvalidator,
        post_service: PostService,
    ) -> None:
        super().__init__(session_service, invalidator)
        self.post_service = post_service

    async def authorize(
        self, request: DeletePostRequest, form: None, user: User
    ) -> PostSummary | MutationResult:
        summary = await self.post_service.get_post_summary(PostId(request.post_id))
        if not summary:
            return MutationResult.form_error(FailureKind.NOT_FOUND, "Post not found")
        if not summary.post.is_authored_by(user.id):
            return MutationResult.form_error(
                FailureKind.UNAUTHORIZED, "You can only delete your own posts"
            )
        return summary

    async def mutate(
        self,
        request: DeletePostRequest,
        form: None,
        user: User,
        target: PostSummary,
    ) -> None:
        await self.post_service.delete_post(target.post.id)

    def transition(self, target: PostSummary, outcome: None) -> Transition:
        slug = target.topic_slug.root
        return Transition(
            invalidate=[topic_path(slug), post_path(slug, target.post.id)],
            redirect_to=topic_path(slug),
        )
