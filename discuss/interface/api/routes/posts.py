"""Post routes."""

from typing import Any
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Cookie, HTTPException, status
from fastapi.responses import JSONResponse

from discuss.application.usecase.post import (
    DeletePostRequest,
    DeletePostUseCase,
    EditPostRequest,
    EditPostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsResponse,
    ListTopPostsUseCase,
    PostItem,
    SearchPostsRequest,
    SearchPostsUseCase,
)
from discuss.domain.error import NotFoundError
from discuss.interface.api.responses import mutation_response

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


@router.get("/top", response_model=ListPostsResponse)
async def list_top_posts(
    list_top_posts_use_case: FromDishka[ListTopPostsUseCase],
) -> ListPostsResponse:
    """Most discussed posts, newest first on ties."""
    return await list_top_posts_use_case.execute()


@router.get("/search", response_model=ListPostsResponse)
async def search_posts(
    search_posts_use_case: FromDishka[SearchPostsUseCase],
    term: str = "",
) -> ListPostsResponse:
    """Posts whose title or content contains ``term``."""
    return await search_posts_use_case.execute(SearchPostsRequest(term=term))


@router.get("/{post_id}", response_model=PostItem)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostItem:
    """Get a post.

    Raises:
        HTTPException: 404 if the post doesn't exist
    """
    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.patch("/{post_id}")
async def edit_post(
    post_id: UUID,
    edit_post_use_case: FromDishka[EditPostUseCase],
    form: dict[str, Any] | None = Body(default=None),
    auth_token: str | None = Cookie(default=None),
) -> JSONResponse:
    """Edit a post. Only its author may do so.

    Body: ``{"title": "...", "content": "..."}``.
    """
    result = await edit_post_use_case.execute(
        EditPostRequest(post_id=post_id, auth_token=auth_token, form=form or {})
    )
    return mutation_response(result)


@router.delete("/{post_id}")
async def delete_post(
    post_id: UUID,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    auth_token: str | None = Cookie(default=None),
) -> JSONResponse:
    """Delete a post and its comments. Only its author may do so."""
    result = await delete_post_use_case.execute(
        DeletePostRequest(post_id=post_id, auth_token=auth_token)
    )
    return mutation_response(result)
