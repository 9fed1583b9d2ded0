"""Authentication routes."""

import logging
import secrets
from urllib.parse import urlencode

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Response, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel

from discuss.adapter.error import ProviderError
from discuss.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
)
from discuss.application.usecase.post import (
    ListPostsResponse,
    ListUserPostsRequest,
    ListUserPostsUseCase,
)
from discuss.config import Settings
from discuss.domain.service import AuthService
from discuss.domain.value import AuthProvider

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)

AUTH_COOKIE = "auth_token"


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


def _cookie_options(settings: Settings) -> dict:
    """Cookie attributes for the current environment.

    Production serves the API and the frontend from sibling subdomains,
    which needs a cross-site, secure cookie on the parent domain.
    """
    is_production = settings.environment == "production"
    return {
        "domain": settings.auth.cookie_domain if is_production else None,
        "secure": is_production,
        "samesite": "none" if is_production else "lax",
    }


@router.get("/login/github")
async def login_github(auth_service: FromDishka[AuthService]) -> RedirectResponse:
    """Start GitHub sign-in by redirecting to GitHub's consent page."""
    state = secrets.token_urlsafe(32)
    auth_url = await auth_service.initiate_login(AuthProvider.GITHUB, state)
    logger.info("Initiating github login")
    return RedirectResponse(url=auth_url, status_code=status.HTTP_302_FOUND)


@router.get("/callback/github")
async def github_callback(
    code: str,
    state: str,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> RedirectResponse:
    """Handle GitHub OAuth callback and complete login.

    Completes the OAuth flow, creates/updates the user, issues a JWT cookie,
    and redirects to the frontend. Failures redirect to the frontend's
    error page instead.

    Example:
        GET /auth/callback/github?code=abc123&state=xyz789

        Redirects to: http://localhost:3000/
        Sets cookie: auth_token
    """
    logger.info("OAuth callback received: provider=github")

    try:
        login_response = await login_use_case.execute(
            LoginRequest(provider=AuthProvider.GITHUB, code=code, state=state)
        )
    except (ProviderError, ValueError) as e:
        logger.error("OAuth callback failed: %s", e)
        query = urlencode({"error": "auth_failed", "message": str(e)})
        return RedirectResponse(
            url=f"{settings.api.frontend_url}/auth/error?{query}",
            status_code=status.HTTP_302_FOUND,
        )

    logger.info("Login successful for user: %s", login_response.user_id)

    # Cookies must be set on the response actually returned
    redirect_response = RedirectResponse(
        url=settings.api.frontend_url, status_code=status.HTTP_302_FOUND
    )
    redirect_response.set_cookie(
        key=AUTH_COOKIE,
        value=login_response.token,
        httponly=True,
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
        **_cookie_options(settings),
    )
    return redirect_response


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Logout user by clearing authentication cookie."""
    # Delete cookie with same domain/path as when it was created
    options = _cookie_options(settings)
    response.delete_cookie(key=AUTH_COOKIE, domain=options["domain"], path="/")
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetCurrentUserResponse:
    """Get current user if authenticated, or return unauthenticated status.

    Safe to call without authentication: returns ``authenticated=false``
    for a missing, invalid or expired token.
    """
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=auth_token)
    )


@router.get("/me/posts", response_model=ListPostsResponse)
async def list_my_posts(
    list_user_posts_use_case: FromDishka[ListUserPostsUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ListPostsResponse:
    """List the posts the signed-in user wrote, newest first.

    Raises:
        HTTPException: 401 without a valid session
    """
    response = await list_user_posts_use_case.execute(
        ListUserPostsRequest(token=auth_token)
    )
    if response is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated"
        )
    return response
