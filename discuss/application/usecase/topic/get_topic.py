"""Get topic use case."""

from pydantic import BaseModel

from discuss.application.usecase.post.get_post import PostItem
from discuss.application.usecase.topic.list_topics import TopicItem
from discuss.domain.error import NotFoundError
from discuss.domain.service import PostService, TopicService
from discuss.domain.value import TopicSlug


class GetTopicRequest(BaseModel):
    """Get topic request."""

    slug: str


class GetTopicResponse(BaseModel):
    """Topic with its posts, newest first."""

    topic: TopicItem
    posts: list[PostItem]


class GetTopicUseCase:
    """Use case for the topic page."""

    def __init__(self, topic_service: TopicService, post_service: PostService) -> None:
        """Initialize get topic use case.

        Args:
            topic_service: Topic domain service
            post_service: Post domain service
        """
        self.topic_service = topic_service
        self.post_service = post_service

    async def execute(self, request: GetTopicRequest) -> GetTopicResponse:
        """Load a topic and its posts.

        Raises:
            NotFoundError: If no topic has this slug
        """
        slug = TopicSlug.parse(request.slug)
        topic = await self.topic_service.get_topic_by_slug(slug) if slug else None
        if not topic:
            raise NotFoundError("Topic", request.slug)

        posts = await self.post_service.list_posts_for_topic(topic.id)
        return GetTopicResponse(
            topic=TopicItem.from_domain(topic),
            posts=[PostItem.from_summary(summary) for summary in posts],
        )
