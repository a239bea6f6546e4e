"""User entity.

Accounts are owned by the authentication service. This API reads them to
attribute content and to enrich comments with author details.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from artbook.domain.model.common import DomainModel
from artbook.domain.value import UserId


class User(DomainModel):
    """User account as seen by the content API."""

    id: UserId
    name: str = Field(min_length=1, max_length=255)
    email: Optional[str] = None
    image: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
