"""Base use cases.

Every state-changing operation follows the same five stages:

1. validate     the submitted form against its schema
2. authenticate the caller from the session token
3. authorize    the caller against the target record
4. mutate       the store with a single operation
5. invalidate   the stale views and hand back where to go next

A failing stage ends the run; expected failures come back as a
``MutationResult`` instead of an exception.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar, Optional

import logfire
from pydantic import BaseModel, Field, ValidationError, computed_field

from discuss.application.invalidation import ViewInvalidator
from discuss.domain.error import StorageError
from discuss.domain.model import User
from discuss.domain.service import SessionService

# Key under which errors that belong to no single field are reported
FORM_ERROR = "formError"


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class FailureKind(str, Enum):
    """Why a mutation was rejected."""

    VALIDATION = "validation"
    UNAUTHENTICATED = "unauthenticated"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    STORAGE = "storage"


class MutationResult(BaseModel):
    """Outcome of a mutation.

    ``errors`` maps form field names to messages; errors not tied to a field
    sit under ``formError``. A result without errors is a success.
    """

    errors: dict[str, list[str]] = Field(default_factory=dict)
    failure: Optional[FailureKind] = None
    redirect_to: Optional[str] = None
    invalidated: list[str] = Field(default_factory=list)

    @computed_field
    @property
    def succeeded(self) -> bool:
        return not self.errors

    @classmethod
    def form_error(cls, failure: FailureKind, message: str) -> "MutationResult":
        """A failure carrying a single general message."""
        return cls(errors={FORM_ERROR: [message]}, failure=failure)

    @classmethod
    def invalid(cls, error: ValidationError) -> "MutationResult":
        """A validation failure, messages grouped by field."""
        errors: dict[str, list[str]] = {}
        for detail in error.errors():
            loc = detail.get("loc") or ()
            key = str(loc[0]) if loc else FORM_ERROR
            errors.setdefault(key, []).append(detail["msg"])
        return cls(errors=errors, failure=FailureKind.VALIDATION)


class MutationRequest(BaseModel):
    """Raw mutation input: the session token and the submitted form fields."""

    auth_token: Optional[str] = None
    form: dict[str, Any] = Field(default_factory=dict)


class Transition(BaseModel):
    """Views made stale by a mutation and the page to show next."""

    invalidate: list[str]
    redirect_to: Optional[str] = None


class MutationUseCase(BaseUseCase):
    """Template for state-changing use cases.

    Subclasses set the class attributes and implement ``authorize``,
    ``mutate`` and ``transition``; ``execute`` runs the stages in order.
    """

    # Short name used in spans and log events
    operation: ClassVar[str]
    # Schema of the submitted form; None when the operation takes no form
    form_model: ClassVar[Optional[type[BaseModel]]] = None
    # Shown when the caller isn't signed in
    login_message: ClassVar[str]
    # Shown when the store fails without a message of its own
    fallback_message: ClassVar[str]

    def __init__(
        self, session_service: SessionService, invalidator: ViewInvalidator
    ) -> None:
        """Initialize mutation use case.

        Args:
            session_service: Resolves the caller from the session token
            invalidator: Marks views stale after a successful mutation
        """
        self.session_service = session_service
        self.invalidator = invalidator

    async def execute(self, request: MutationRequest) -> MutationResult:
        """Run validate, authenticate, authorize, mutate and invalidate.

        Args:
            request: Operation-specific mutation request

        Returns:
            Empty-error result with the redirect target on success, otherwise
            the errors of the first stage that failed
        """
        with logfire.span(f"mutation.{self.operation}"):
            form = self.validate(request.form)
            if isinstance(form, MutationResult):
                self._log_rejection("validate", form)
                return form

            user = await self.session_service.get_current_user(request.auth_token)
            if user is None:
                result = MutationResult.form_error(
                    FailureKind.UNAUTHENTICATED, self.login_message
                )
                self._log_rejection("authenticate", result)
                return result

            target = await self.authorize(request, form, user)
            if isinstance(target, MutationResult):
                self._log_rejection("authorize", target)
                return target

            try:
                outcome = await self.mutate(request, form, user, target)
            except StorageError as e:
                result = MutationResult.form_error(
                    FailureKind.STORAGE, str(e) or self.fallback_message
                )
                logfire.error(
                    "Mutation storage failure",
                    operation=self.operation,
                    error=str(e),
                )
                return result

            transition = self.transition(target, outcome)
            for path in transition.invalidate:
                self.invalidator.invalidate(path)

            logfire.info(
                "Mutation applied",
                operation=self.operation,
                user_id=str(user.id),
                invalidated=transition.invalidate,
                redirect_to=transition.redirect_to,
            )
            return MutationResult(
                redirect_to=transition.redirect_to,
                invalidated=transition.invalidate,
            )

    def validate(
        self, raw: dict[str, Any]
    ) -> Optional[BaseModel] | MutationResult:
        """Parse the submitted form.

        Returns:
            The parsed form (None when the operation takes no form), or a
            validation failure with every field's messages
        """
        if self.form_model is None:
            return None
        try:
            return self.form_model.model_validate(raw)
        except ValidationError as e:
            return MutationResult.invalid(e)

    async def authorize(
        self, request: MutationRequest, form: Any, user: User
    ) -> Any:
        """Resolve the record the mutation acts on.

        Returns:
            The target (None when there is none), or a failure result
        """
        return None

    @abstractmethod
    async def mutate(
        self, request: MutationRequest, form: Any, user: User, target: Any
    ) -> Any:
        """Perform the single storage operation.

        Raises:
            StorageError: If the store rejects the operation
        """
        pass

    @abstractmethod
    def transition(self, target: Any, outcome: Any) -> Transition:
        """Views to invalidate and the page to go to after success."""
        pass

    def _log_rejection(self, stage: str, result: MutationResult) -> None:
        logfire.warn(
            "Mutation rejected",
            operation=self.operation,
            stage=stage,
            failure=result.failure.value if result.failure else None,
            fields=sorted(result.errors),
        )
