"""Topic entity.

Topics are the top-level discussion categories, addressed by slug.
They are created once and never edited or deleted.
"""

from datetime import datetime

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import TopicId, TopicSlug


class Topic(DomainModel):
    """Topic entity."""

    id: TopicId
    slug: TopicSlug
    description: str = Field(min_length=10)
    created_at: datetime = Field(default_factory=datetime.now)
