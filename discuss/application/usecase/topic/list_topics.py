"""List topics use case."""

from datetime import datetime

from pydantic import BaseModel

from discuss.domain.model import Topic
from discuss.domain.service import TopicService


class TopicItem(BaseModel):
    """Topic in a response."""

    topic_id: str
    slug: str
    description: str
    created_at: datetime

    @classmethod
    def from_domain(cls, topic: Topic) -> "TopicItem":
        return cls(
            topic_id=str(topic.id),
            slug=topic.slug.root,
            description=topic.description,
            created_at=topic.created_at,
        )


class ListTopicsResponse(BaseModel):
    """List topics response."""

    topics: list[TopicItem]
    total: int


class ListTopicsUseCase:
    """Use case for listing all topics (home page)."""

    def __init__(self, topic_service: TopicService) -> None:
        self.topic_service = topic_service

    async def execute(self) -> ListTopicsResponse:
        topics = await self.topic_service.list_topics()
        items = [TopicItem.from_domain(topic) for topic in topics]
        return ListTopicsResponse(topics=items, total=len(items))
