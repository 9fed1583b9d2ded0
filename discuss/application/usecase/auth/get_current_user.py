"""Get current user use case."""

from datetime import datetime

from pydantic import BaseModel

from discuss.domain.service import SessionService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None = None  # JWT token from the auth cookie


class CurrentUser(BaseModel):
    """Signed-in user."""

    user_id: str
    name: str | None
    email: str | None
    image: str | None
    created_at: datetime


class GetCurrentUserResponse(BaseModel):
    """Session status.

    ``user`` is None when the caller isn't signed in.
    """

    authenticated: bool
    user: CurrentUser | None = None


class GetCurrentUserUseCase:
    """Use case for resolving the signed-in user."""

    def __init__(self, session_service: SessionService) -> None:
        self.session_service = session_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        user = await self.session_service.get_current_user(request.token)
        if user is None:
            return GetCurrentUserResponse(authenticated=False)

        return GetCurrentUserResponse(
            authenticated=True,
            user=CurrentUser(
                user_id=str(user.id),
                name=user.name,
                email=user.email,
                image=user.image,
                created_at=user.created_at,
            ),
        )
