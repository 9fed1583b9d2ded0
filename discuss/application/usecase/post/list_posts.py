"""Post listing use cases: top posts, search and the caller's own posts."""

from typing import Optional

from pydantic import BaseModel

from discuss.application.usecase.post.get_post import PostItem
from discuss.config import Settings
from discuss.domain.service import PostService, SessionService


class ListPostsResponse(BaseModel):
    """List of posts."""

    posts: list[PostItem]
    total: int


class ListTopPostsUseCase:
    """Use case for the most discussed posts on the home page."""

    def __init__(self, post_service: PostService, settings: Settings) -> None:
        self.post_service = post_service
        self.limit = settings.listing.top_posts_limit

    async def execute(self) -> ListPostsResponse:
        """List posts by comment count, newest first on ties."""
        posts = await self.post_service.list_top_posts(self.limit)
        items = [PostItem.from_summary(summary) for summary in posts]
        return ListPostsResponse(posts=items, total=len(items))


class SearchPostsRequest(BaseModel):
    """Search posts request."""

    term: str = ""


class SearchPostsUseCase:
    """Use case for searching posts by title or content."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: SearchPostsRequest) -> ListPostsResponse:
        """Find posts containing the term, newest first.

        A blank term matches nothing.
        """
        term = request.term.strip()
        if not term:
            return ListPostsResponse(posts=[], total=0)

        posts = await self.post_service.search_posts(term)
        items = [PostItem.from_summary(summary) for summary in posts]
        return ListPostsResponse(posts=items, total=len(items))


class ListUserPostsRequest(BaseModel):
    """List user posts request."""

    token: Optional[str] = None


class ListUserPostsUseCase:
    """Use case for listing the posts the signed-in user wrote."""

    def __init__(
        self, session_service: SessionService, post_service: PostService
    ) -> None:
        self.session_service = session_service
        self.post_service = post_service

    async def execute(
        self, request: ListUserPostsRequest
    ) -> Optional[ListPostsResponse]:
        """List the caller's posts, newest first.

        Returns:
            The posts, or None when the token doesn't resolve to a user
        """
        user = await self.session_service.get_current_user(request.token)
        if user is None:
            return None

        posts = await self.post_service.list_posts_by_author(user.id)
        items = [PostItem.from_summary(summary) for summary in posts]
        return ListPostsResponse(posts=items, total=len(items))
