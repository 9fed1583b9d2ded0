"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase, PostForm
from .delete_post import DeletePostRequest, DeletePostUseCase
from .edit_post import EditPostRequest, EditPostUseCase
from .get_post import GetPostRequest, GetPostUseCase, PostItem
from .list_posts import (
    ListPostsResponse,
    ListTopPostsUseCase,
    ListUserPostsRequest,
    ListUserPostsUseCase,
    SearchPostsRequest,
    SearchPostsUseCase,
)

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostUseCase",
    "EditPostRequest",
    "EditPostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "ListPostsResponse",
    "ListTopPostsUseCase",
    "ListUserPostsRequest",
    "ListUserPostsUseCase",
    "PostForm",
    "PostItem",
    "SearchPostsRequest",
    "SearchPostsUseCase",
]
