"""Domain services."""

from .auth_service import AuthService, OAuthClient
from .base import Service
from .comment_service import CommentService
from .comment_tree import (
    CommentNode,
    build_comment_tree,
    children_of,
    render_comment_tree,
    roots_of,
    walk_comment_tree,
)
from .jwt_service import JWTService
from .post_service import PostService
from .session_service import SessionService
from .topic_service import TopicService
from .user_identity_service import UserIdentityService
from .user_service import UserService

__all__ = [
    "AuthService",
    "CommentNode",
    "CommentService",
    "JWTService",
    "OAuthClient",
    "PostService",
    "Service",
    "SessionService",
    "TopicService",
    "UserIdentityService",
    "UserService",
    "build_comment_tree",
    "children_of",
    "render_comment_tree",
    "roots_of",
    "walk_comment_tree",
]
