"""Edit post use case."""

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
from discuss.application.usecase.post.create_post import PostForm
from discuss.domain.error import StorageError
from discuss.domain.model import Post, PostSummary, User
from discuss.domain.service import PostService, SessionService
from discuss.domain.value import PostId


class EditPostRequest(MutationRequest):
    """Edit post request."""

    post_id: UUID


class EditPostUseCase(MutationUseCase):
    """Use case for an author editing their post."""

    operation = "edit_post"
    form_model = PostForm
    login_message = "You must be logged in to edit posts"
    fallback_message = "Failed to update post."

    def __init__(
        self,
        session_service: SessionService,
        invalidator: ViewInvalidator,
        post_service: PostService,
    ) -> None:
        super().__init__(session_service, invalidator)
        self.post_service = post_service

    async def authorize(
        self, request: EditPostRequest, form: PostForm, user: User
    ) -> PostSummary | MutationResult:
        summary = await self.post_service.get_post_summary(PostId(request.post_id))
        if not summary:
            return MutationResult.form_error(FailureKind.NOT_FOUND, "Post not found")
        if not summary.post.is_authored_by(user.id):
            return MutationResult.form_error(
                FailureKind.UNAUTHORIZED, "You can only edit your own posts"
            )
        return summary

    async def mutate(
        self,
        request: EditPostRequest,
        form: PostForm,
        user: User,
        target: PostSummary,
    ) -> Post:
        updated = await self.post_service.update_content(
            target.post.id, form.title, form.content
        )
        if updated is None:
            # Deleted between authorize and mutate
            raise StorageError("Post not found")
        return updated

    def transition(self, target: PostSummary, outcome: Post) -> Transition:
        slug = target.topic_slug.root
        path = post_path(slug, outcome.id)
        return Transition(invalidate=[path, topic_path(slug)], redirect_to=path)
