"""Topic routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Cookie, HTTPException, status
from fastapi.responses import JSONResponse

from discuss.adapter.cache import InMemoryViewCache
from discuss.application.paths import HOME_PATH, topic_path
from discuss.application.usecase.post import CreatePostRequest, CreatePostUseCase
from discuss.application.usecase.topic import (
    CreateTopicRequest,
    CreateTopicUseCase,
    GetTopicRequest,
    GetTopicUseCase,
    ListTopicsUseCase,
)
from discuss.domain.error import NotFoundError
from discuss.interface.api.responses import mutation_response

router = APIRouter(prefix="/topics", tags=["topics"], route_class=DishkaRoute)


@router.get("")
async def list_topics(
    list_topics_use_case: FromDishka[ListTopicsUseCase],
    cache: FromDishka[InMemoryViewCache],
) -> dict[str, Any]:
    """List all topics (home page data).

    Served from the view cache until a new topic is created.
    """
    view = cache.get(HOME_PATH)
    if view is None:
        response = await list_topics_use_case.execute()
        view = response.model_dump(mode="json")
        cache.put(HOME_PATH, view)
    return view


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_topic(
    create_topic_use_case: FromDishka[CreateTopicUseCase],
    form: dict[str, Any] | None = Body(default=None),
    auth_token: str | None = Cookie(default=None),
) -> JSONResponse:
    """Create a topic.

    Body: ``{"name": "machine-learning", "description": "..."}``. The result
    carries field errors or the path of the new topic.
    """
    result = await create_topic_use_case.execute(
        CreateTopicRequest(auth_token=auth_token, form=form or {})
    )
    return mutation_response(result, status.HTTP_201_CREATED)


@router.get("/{slug}")
async def get_topic(
    slug: str,
    get_topic_use_case: FromDishka[GetTopicUseCase],
    cache: FromDishka[InMemoryViewCache],
) -> dict[str, Any]:
    """Get a topic with its posts, newest first.

    Raises:
        HTTPException: 404 if no topic has this slug
    """
    path = topic_path(slug)
    view = cache.get(path)
    if view is None:
        try:
            response = await get_topic_use_case.execute(GetTopicRequest(slug=slug))
        except NotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
        view = response.model_dump(mode="json")
        cache.put(path, view)
    return view


@router.post("/{slug}/posts", status_code=status.HTTP_201_CREATED)
async def create_post(
    slug: str,
    create_post_use_case: FromDishka[CreatePostUseCase],
    form: dict[str, Any] | None = Body(default=None),
    auth_token: str | None = Cookie(default=None),
) -> JSONResponse:
    """Create a post in a topic.

    Body: ``{"title": "...", "content": "..."}``.
    """
    result = await create_post_use_case.execute(
        CreatePostRequest(topic_slug=slug, auth_token=auth_token, form=form or {})
    )
    return mutation_response(result, status.HTTP_201_CREATED)
