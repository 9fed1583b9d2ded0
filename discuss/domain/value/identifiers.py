"""Strongly typed identifiers for Discuss entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
UserIdentityId = NewType("UserIdentityId", UUID)
TopicId = NewType("TopicId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
