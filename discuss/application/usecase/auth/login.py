"""Login use case."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire
from pydantic import BaseModel

from discuss.domain.model.user import User
from discuss.domain.model.user_identity import UserIdentity
from discuss.domain.service import (
    AuthService,
    JWTService,
    UserIdentityService,
    UserService,
)
from discuss.domain.value import AuthProvider, UserId, UserIdentityId


class LoginRequest(BaseModel):
    """Login request from OAuth callback."""

    provider: AuthProvider
    code: str  # OAuth authorization code
    state: str  # State parameter for CSRF verification


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    user_id: str
    name: str | None
    is_new_user: bool


class LoginUseCase:
    """Use case for signing in through an OAuth provider."""

    def __init__(
        self,
        auth_service: AuthService,
        jwt_service: JWTService,
        user_service: UserService,
        user_identity_service: UserIdentityService,
    ) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
            user_service: User domain service
            user_identity_service: User identity domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service
        self.user_service = user_service
        self.user_identity_service = user_identity_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Steps:
        1. Complete OAuth flow with the provider and get the profile
        2. Existing identity: refresh the user profile, stamp the login
        3. New identity: create user + identity
        4. Issue JWT token

        Args:
            request: Login request with OAuth callback parameters

        Returns:
            Login response with JWT token and user info

        Raises:
            ValueError: If provider not supported or the identity is orphaned
        """
        info = await self.auth_service.complete_login(
            request.provider, request.code, request.state
        )

        logfire.info(
            "OAuth completed",
            provider=info.provider.value,
            provider_user_id=info.provider_user_id,
            login=info.login,
        )

        existing_identity = await self.user_identity_service.get_identity_by_provider(
            info.provider, info.provider_user_id
        )

        with logfire.span(
            "login_user",
            login=info.login,
            provider=info.provider.value,
            is_new_user=not bool(existing_identity),
        ):
            if existing_identity:
                user = await self.user_service.find_by_id(existing_identity.user_id)
                if not user:
                    raise ValueError("User not found for existing identity")

                user = await self.user_service.refresh_profile(user, info)
                await self.user_identity_service.record_login(
                    existing_identity, info.login
                )

                logfire.info(
                    "Existing user logged in",
                    user_id=str(user.id),
                    provider=info.provider.value,
                )
                is_new_user = False
            else:
                now = datetime.now(timezone.utc)
                user = await self.user_service.save(
                    User(
                        id=UserId(uuid4()),
                        name=info.display_name or info.login,
                        email=info.email,
                        image=info.avatar_url,
                        created_at=now,
                        updated_at=now,
                    )
                )
                await self.user_identity_service.save(
                    UserIdentity(
                        id=UserIdentityId(uuid4()),
                        user_id=user.id,
                        provider=info.provider,
                        provider_user_id=info.provider_user_id,
                        provider_login=info.login,
                        created_at=now,
                        last_login_at=now,
                    )
                )

                logfire.info(
                    "New user created",
                    user_id=str(user.id),
                    provider=info.provider.value,
                    provider_user_id=info.provider_user_id,
                )
                is_new_user = True

            token = self.jwt_service.create_token(user_id=str(user.id), name=user.name)

            return LoginResponse(
                token=token,
                user_id=str(user.id),
                name=user.name,
                is_new_user=is_new_user,
            )
