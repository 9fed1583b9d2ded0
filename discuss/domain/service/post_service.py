"""Post domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from discuss.domain.model.post import Post, PostSummary
from discuss.domain.model.user import User
from discuss.domain.repository import CommentRepository, PostRepository
from discuss.domain.value import PostId, TopicId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository (for cascading deletes)
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def create_post(
        self, topic_id: TopicId, author: User, title: str, content: str
    ) -> Post:
        """Create a post in a topic.

        Args:
            topic_id: Owning topic
            author: Authenticated author
            title: Post title
            content: Post body

        Returns:
            Created post

        Raises:
            StorageError: If the store rejects the insert
        """
        with logfire.span(
            "post_service.create_post",
            topic_id=str(topic_id),
            author_id=str(author.id),
            title=title,
        ):
            now = datetime.now()
            post = Post(
                id=PostId(uuid4()),
                topic_id=topic_id,
                author_id=author.id,
                author_name=author.name,
                title=title,
                content=content,
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id), topic_id=str(topic_id))
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def get_post_summary(self, post_id: PostId) -> PostSummary | None:
        """Get a post with its topic slug and comment count."""
        with logfire.span("post_service.get_post_summary", post_id=str(post_id)):
            summary = await self.post_repository.find_summary(post_id)
            if not summary:
                logfire.warn("Post not found", post_id=str(post_id))
            return summary

    async def list_posts_for_topic(self, topic_id: TopicId) -> list[PostSummary]:
        """List the posts of a topic, newest first."""
        with logfire.span("post_service.list_posts_for_topic", topic_id=str(topic_id)):
            posts = await self.post_repository.find_by_topic(topic_id)
            logfire.info("Posts listed", topic_id=str(topic_id), count=len(posts))
            return posts

    async def list_posts_by_author(self, author_id: UserId) -> list[PostSummary]:
        """List the posts a user wrote, newest first."""
        with logfire.span(
            "post_service.list_posts_by_author", author_id=str(author_id)
        ):
            posts = await self.post_repository.find_by_author(author_id)
            logfire.info("Posts listed", author_id=str(author_id), count=len(posts))
            return posts

    async def list_top_posts(self, limit: int) -> list[PostSummary]:
        """List the most commented posts."""
        with logfire.span("post_service.list_top_posts", limit=limit):
            posts = await self.post_repository.find_top(limit=limit)
            logfire.info("Top posts listed", count=len(posts))
            return posts

    async def search_posts(self, term: str) -> list[PostSummary]:
        """Search posts by title or content."""
        with logfire.span("post_service.search_posts", term=term):
            posts = await self.post_repository.search(term)
            logfire.info("Posts searched", term=term, count=len(posts))
            return posts

    async def update_content(
        self, post_id: PostId, title: str, content: str
    ) -> Post | None:
        """Replace the title and content of a post.

        Args:
            post_id: Post ID
            title: New title
            content: New content

        Returns:
            Updated post, or None if the post doesn't exist

        Raises:
            StorageError: If the store rejects the update
        """
        with logfire.span(
            "post_service.update_content",
            post_id=str(post_id),
            title=title,
            content_length=len(content),
        ):
            updated = await self.post_repository.update_content(post_id, title, content)

            if updated:
                logfire.info("Post content updated", post_id=str(post_id))
            else:
                logfire.warn("Post not found for update", post_id=str(post_id))

            return updated

    async def delete_post(self, post_id: PostId) -> None:
        """Delete a post and all of its comments.

        Both deletes run in the caller's transaction.

        Args:
            post_id: Post ID

        Raises:
            StorageError: If the store rejects a delete
        """
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            removed = await self.comment_repository.delete_by_post(post_id)
            await self.post_repository.delete(post_id)
            logfire.info(
                "Post deleted", post_id=str(post_id), comments_removed=removed
            )
