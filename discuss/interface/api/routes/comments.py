"""Comment routes."""

from typing import Any
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Cookie, HTTPException, status
from fastapi.responses import JSONResponse

from discuss.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from discuss.domain.error import NotFoundError
from discuss.interface.api.responses import mutation_response

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


@router.get("/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get the comment threads of a post.

    Raises:
        HTTPException: 404 if the post doesn't exist
    """
    try:
        return await get_comments_use_case.execute(GetCommentsRequest(post_id=post_id))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/{post_id}/comments/{comment_id}", response_model=GetCommentsResponse)
async def get_comment_thread(
    post_id: UUID,
    comment_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get one comment with all replies below it.

    Raises:
        HTTPException: 404 if the post or the comment doesn't exist
    """
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(post_id=post_id, comment_id=comment_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/{post_id}/comments", status_code=status.HTTP_201_CREATED)
async def create_comment(
    post_id: UUID,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    form: dict[str, Any] | None = Body(default=None),
    auth_token: str | None = Cookie(default=None),
) -> JSONResponse:
    """Comment on a post, or reply to a comment with ``parent_id``.

    Body: ``{"content": "...", "parent_id": "<comment uuid>"}``.
    """
    result = await create_comment_use_case.execute(
        CreateCommentRequest(post_id=post_id, auth_token=auth_token, form=form or {})
    )
    return mutation_response(result, status.HTTP_201_CREATED)
