"""Comment use cases."""

from .create_comment import CommentForm, CreateCommentRequest, CreateCommentUseCase
from .get_comments import (
    CommentTreeItem,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)

__all__ = [
    "CommentForm",
    "CommentTreeItem",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
]
