"""Post entity.

Every artbook owns exactly one post. The post is the engagement anchor:
likes and comments reference it, and it carries the view counter.
"""

from datetime import datetime

from pydantic import Field

from artbook.domain.model.common import DomainModel
from artbook.domain.value import ArtbookId, PostId


class Post(DomainModel):
    """Engagement anchor for an artbook."""

    id: PostId
    artbook_id: ArtbookId
    views: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
