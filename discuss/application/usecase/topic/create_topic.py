"""Create topic use case."""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from discuss.application.invalidation import ViewInvalidator
from discuss.application.paths import HOME_PATH, topic_path
from discuss.application.usecase.base import (
    MutationRequest,
    MutationResult,
    MutationUseCase,
    Transition,
)
from discuss.domain.model import Topic, User
from discuss.domain.service import SessionService, TopicService
from discuss.domain.value import TopicSlug
from discuss.domain.value.types import TOPIC_SLUG_PATTERN

SLUG_MESSAGE = "Must be lowercase letter without spaces"


class CreateTopicForm(BaseModel):
    """Submitted topic form. ``name`` becomes the topic slug."""

    name: str = Field(min_length=3)
    description: str = Field(min_length=10)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not TOPIC_SLUG_PATTERN.match(v):
            raise PydanticCustomError("topic_slug", SLUG_MESSAGE)
        return v


class CreateTopicRequest(MutationRequest):
    """Create topic request."""

    pass


class CreateTopicUseCase(MutationUseCase):
    """Use case for creating a topic."""

    operation = "create_topic"
    form_model = CreateTopicForm
    login_message = "You have to login first!"
    fallback_message = "Something went wrong."

    def __init__(
        self,
        session_service: SessionService,
        invalidator: ViewInvalidator,
        topic_service: TopicService,
    ) -> None:
        super().__init__(session_service, invalidator)
        self.topic_service = topic_service

    def validate(
        self, raw: dict[str, Any]
    ) -> Optional[BaseModel] | MutationResult:
        """Parse the form, reporting the slug pattern next to a length error.

        A too-short name stops pydantic before the pattern check, so a name
        like "AB" would otherwise only hear about its length.
        """
        result = super().validate(raw)
        name = raw.get("name")
        if (
            isinstance(result, MutationResult)
            and isinstance(name, str)
            and not TOPIC_SLUG_PATTERN.match(name)
        ):
            messages = result.errors.setdefault("name", [])
            if SLUG_MESSAGE not in messages:
                messages.append(SLUG_MESSAGE)
        return result

    async def mutate(
        self, request: MutationRequest, form: CreateTopicForm, user: User, target: Any
    ) -> Topic:
        return await self.topic_service.create_topic(
            slug=TopicSlug(form.name), description=form.description
        )

    def transition(self, target: Any, outcome: Topic) -> Transition:
        return Transition(
            invalidate=[HOME_PATH], redirect_to=topic_path(outcome.slug.root)
        )
