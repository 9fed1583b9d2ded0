"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import desc, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from discuss.domain.model import Post, PostSummary
from discuss.domain.repository import PostRepository
from discuss.domain.value import PostId, TopicId, UserId
from discuss.persistence.database import execute_write
from discuss.persistence.mappers import post_to_dict, row_to_post, row_to_post_summary
from discuss.persistence.tables import comments_table, posts_table, topics_table

# Correlated count of a post's comments
comment_count = (
    select(func.count())
    .select_from(comments_table)
    .where(comments_table.c.post_id == posts_table.c.id)
    .correlate(posts_table)
    .scalar_subquery()
    .label("comment_count")
)


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _summaries(self) -> Select:
        """Posts joined with their topic slug and comment count."""
        return select(
            posts_table,
            topics_table.c.slug.label("topic_slug"),
            comment_count,
        ).join(topics_table, topics_table.c.id == posts_table.c.topic_id)

    async def _fetch_summaries(self, stmt: Select) -> List[PostSummary]:
        result = await self.session.execute(stmt)
        return [row_to_post_summary(row._asdict()) for row in result.fetchall()]

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_summary(self, post_id: PostId) -> Optional[PostSummary]:
        """Find a post with its topic slug and comment count."""
        summaries = await self._fetch_summaries(
            self._summaries().where(posts_table.c.id == post_id)
        )
        return summaries[0] if summaries else None

    async def find_by_topic(self, topic_id: TopicId) -> List[PostSummary]:
        """Find the posts of a topic, newest first."""
        stmt = (
            self._summaries()
            .where(posts_table.c.topic_id == topic_id)
            .order_by(desc(posts_table.c.created_at))
        )
        return await self._fetch_summaries(stmt)

    async def find_by_author(self, author_id: UserId) -> List[PostSummary]:
        """Find the posts a user wrote, newest first."""
        stmt = (
            self._summaries()
            .where(posts_table.c.author_id == author_id)
            .order_by(desc(posts_table.c.created_at))
        )
        return await self._fetch_summaries(stmt)

    async def find_top(self, limit: int = 5) -> List[PostSummary]:
        """Find the most commented posts, newest first on ties."""
        stmt = (
            self._summaries()
            .order_by(desc(comment_count), desc(posts_table.c.created_at))
            .limit(limit)
        )
        return await self._fetch_summaries(stmt)

    async def search(self, term: str) -> List[PostSummary]:
        """Find posts whose title or content contains the term."""
        stmt = (
            self._summaries()
            .where(
                or_(
                    posts_table.c.title.contains(term, autoescape=True),
                    posts_table.c.content.contains(term, autoescape=True),
                )
            )
            .order_by(desc(posts_table.c.created_at))
        )
        return await self._fetch_summaries(stmt)

    async def save(self, post: Post) -> Post:
        """Insert a new post."""
        stmt = posts_table.insert().values(**post_to_dict(post))
        await execute_write(self.session, stmt)
        return post

    async def update_content(
        self, post_id: PostId, title: str, content: str
    ) -> Optional[Post]:
        """Replace the title and content of a post."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(title=title, content=content, updated_at=datetime.now())
            .returning(posts_table)
        )

        result = await execute_write(self.session, stmt)
        row = result.fetchone()

        if row is None:
            return None

        return row_to_post(row._asdict())

    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete)."""
        stmt = posts_table.delete().where(posts_table.c.id == post_id)
        await execute_write(self.session, stmt)
