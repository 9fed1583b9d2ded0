"""Topic use cases."""

from .create_topic import CreateTopicForm, CreateTopicRequest, CreateTopicUseCase
from .get_topic import GetTopicRequest, GetTopicResponse, GetTopicUseCase
from .list_topics import ListTopicsResponse, ListTopicsUseCase, TopicItem

__all__ = [
    "CreateTopicForm",
    "CreateTopicRequest",
    "CreateTopicUseCase",
    "GetTopicRequest",
    "GetTopicResponse",
    "GetTopicUseCase",
    "ListTopicsResponse",
    "ListTopicsUseCase",
    "TopicItem",
]
