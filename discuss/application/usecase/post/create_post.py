"""Create post use case."""

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
from discuss.domain.model import Post, Topic, User
from discuss.domain.service import PostService, SessionService, TopicService
from discuss.domain.value import TopicSlug


class PostForm(BaseModel):
    """Submitted post form, shared by create and edit."""

    title: str = Field(min_length=3)
    content: str = Field(min_length=10)


class CreatePostRequest(MutationRequest):
    """Create post request."""

    topic_slug: str


class CreatePostUseCase(MutationUseCase):
    """Use case for creating a post in a topic."""

    operation = "create_post"
    form_model = PostForm
    login_message = "You have to login first"
    fallback_message = "Failed to create a post."

    def __init__(
        self,
        session_service: SessionService,
        invalidator: ViewInvalidator,
        topic_service: TopicService,
        post_service: PostService,
    ) -> None:
        super().__init__(session_service, invalidator)
        self.topic_service = topic_service
        self.post_service = post_service

    async def authorize(
        self, request: CreatePostRequest, form: PostForm, user: User
    ) -> Topic | MutationResult:
        slug = TopicSlug.parse(request.topic_slug)
        topic = await self.topic_service.get_topic_by_slug(slug) if slug else None
        if not topic:
            return MutationResult.form_error(FailureKind.NOT_FOUND, "Topic not found")
        return topic

    async def mutate(
        self, request: CreatePostRequest, form: PostForm, user: User, target: Topic
    ) -> Post:
        return await self.post_service.create_post(
            topic_id=target.id,
            author=user,
            title=form.title,
            content=form.content,
        )

    def transition(self, target: Topic, outcome: Post) -> Transition:
        slug = target.slug.root
        return Transition(
            invalidate=[topic_path(slug)], redirect_to=post_path(slug, outcome.id)
        )
