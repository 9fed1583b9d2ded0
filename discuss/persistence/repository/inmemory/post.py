"""In-memory post repository for testing."""

from datetime import datetime
from typing import Optional

from discuss.domain.error import StorageError
from discuss.domain.model.post import Post, PostSummary
from discuss.domain.repository.comment import CommentRepository
from discuss.domain.repository.post import PostRepository
from discuss.domain.repository.topic import TopicRepository
from discuss.domain.value import PostId, TopicId, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Summaries are assembled from the topic and comment repositories it is
    given, standing in for the SQL joins.
    """

    def __init__(
        self,
        topic_repository: TopicRepository,
        comment_repository: CommentRepository,
    ) -> None:
        self._posts: dict[PostId, Post] = {}
        self._topics = topic_repository
        self._comments = comment_repository

    async def _summarize(self, posts: list[Post]) -> list[PostSummary]:
        slugs = {topic.id: topic.slug for topic in await self._topics.find_all()}
        summaries = []
        for post in posts:
            comments = await self._comments.find_by_post(post.id)
            summaries.append(
                PostSummary(
                    post=post,
                    topic_slug=slugs[post.topic_id],
                    comment_count=len(comments),
                )
            )
        return summaries

    def _newest_first(self, posts: list[Post]) -> list[Post]:
        return sorted(posts, key=lambda p: p.created_at, reverse=True)

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_summary(self, post_id: PostId) -> Optional[PostSummary]:
        """Find a post with its topic slug and comment count."""
        post = self._posts.get(post_id)
        if not post:
            return None
        return (await self._summarize([post]))[0]

    async def find_by_topic(self, topic_id: TopicId) -> list[PostSummary]:
        """Find the posts of a topic, newest first."""
        posts = [p for p in self._posts.values() if p.topic_id == topic_id]
        return await self._summarize(self._newest_first(posts))

    async def find_by_author(self, author_id: UserId) -> list[PostSummary]:
        """Find the posts a user wrote, newest first."""
        posts = [p for p in self._posts.values() if p.author_id == author_id]
        return await self._summarize(self._newest_first(posts))

    async def find_top(self, limit: int = 5) -> list[PostSummary]:
        """Find the most commented posts, newest first on ties."""
        posts = self._newest_first(list(self._posts.values()))
        summaries = await self._summarize(posts)
        # Stable sort keeps newest-first order within equal counts
        summaries.sort(key=lambda s: s.comment_count, reverse=True)
        return summaries[:limit]

    async def search(self, term: str) -> list[PostSummary]:
        """Find posts whose title or content contains the term."""
        posts = [
            p for p in self._posts.values() if term in p.title or term in p.content
        ]
        return await self._summarize(self._newest_first(posts))

    async def save(self, post: Post) -> Post:
        """Insert a post."""
        topic_ids = {topic.id for topic in await self._topics.find_all()}
        if post.topic_id not in topic_ids:
            raise StorageError(f"Topic does not exist: {post.topic_id}")
        self._posts[post.id] = post
        return post

    async def update_content(
        self, post_id: PostId, title: str, content: str
    ) -> Optional[Post]:
        """Replace the title and content of a post."""
        post = self._posts.get(post_id)
        if not post:
            return None
        updated = post.model_copy(
            update={"title": title, "content": content, "updated_at": datetime.now()}
        )
        self._posts[post_id] = updated
        return updated

    async def delete(self, post_id: PostId) -> None:
        """Delete a post."""
        self._posts.pop(post_id, None)
