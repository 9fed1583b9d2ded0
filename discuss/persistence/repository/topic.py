"""PostgreSQL implementation of Topic repository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Topic
from discuss.domain.repository import TopicRepository
from discuss.domain.value import TopicSlug
from discuss.persistence.database import execute_write
from discuss.persistence.mappers import row_to_topic, topic_to_dict
from discuss.persistence.tables import topics_table


class PostgresTopicRepository(TopicRepository):
    """PostgreSQL implementation of TopicRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_slug(self, slug: TopicSlug) -> Optional[Topic]:
        """Find a topic by slug."""
        stmt = select(topics_table).where(topics_table.c.slug == slug.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_topic(row._asdict()) if row else None

    async def find_all(self) -> List[Topic]:
        """Find all topics, oldest first."""
        stmt = select(topics_table).order_by(topics_table.c.created_at)
        result = await self.session.execute(stmt)
        return [row_to_topic(row._asdict()) for row in result.fetchall()]

    async def save(self, topic: Topic) -> Topic:
        """Insert a topic; a taken slug violates ``uq_topics_slug``."""
        stmt = topics_table.insert().values(**topic_to_dict(topic))
        await execute_write(self.session, stmt)
        return topic
