"""Domain value objects for Artbook.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from artbook.domain.value.common import RootValueObject


class Category(str, Enum):
    """Closed set of artbook genres."""

    ADVENTURE = "ADVENTURE"
    HORROR = "HORROR"
    ACTION = "ACTION"
    ROMANTIC = "ROMANTIC"
    FIGURE = "FIGURE"


class ReportStatus(str, Enum):
    """Lifecycle status of a report. Triage happens outside this service."""

    PENDING = "PENDING"
    REVIEWED = "REVIEWED"
    RESOLVED = "RESOLVED"
    DISMISSED = "DISMISSED"


class ReportCategory(str, Enum):
    """Reason a reader flagged an artbook."""

    INAPPROPRIATE_CONTENT = "INAPPROPRIATE_CONTENT"
    COPYRIGHT_VIOLATION = "COPYRIGHT_VIOLATION"
    SPAM_MISLEADING = "SPAM_MISLEADING"
    HARASSMENT_BULLYING = "HARASSMENT_BULLYING"
    VIOLENCE_GORE = "VIOLENCE_GORE"
    ADULT_CONTENT = "ADULT_CONTENT"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, value: str) -> "ReportCategory":
        """Resolve a client-supplied category.

        Accepts the enum value itself, the short form ("spam") and the
        hyphenated long form ("spam-misleading").

        Raises:
            ValueError: If the value matches no category
        """
        key = value.strip()
        if key.upper() in cls.__members__:
            return cls[key.upper()]
        try:
            return _REPORT_CATEGORY_ALIASES[key.lower()]
        except KeyError:
            raise ValueError(f"Invalid report category: {value}") from None


_REPORT_CATEGORY_ALIASES: dict[str, ReportCategory] = {
    "inappropriate": ReportCategory.INAPPROPRIATE_CONTENT,
    "copyright": ReportCategory.COPYRIGHT_VIOLATION,
    "spam": ReportCategory.SPAM_MISLEADING,
    "harassment": ReportCategory.HARASSMENT_BULLYING,
    "violence": ReportCategory.VIOLENCE_GORE,
    "adult": ReportCategory.ADULT_CONTENT,
    "other": ReportCategory.OTHER,
    "inappropriate-content": ReportCategory.INAPPROPRIATE_CONTENT,
    "copyright-violation": ReportCategory.COPYRIGHT_VIOLATION,
    "spam-misleading": ReportCategory.SPAM_MISLEADING,
    "harassment-bullying": ReportCategory.HARASSMENT_BULLYING,
    "violence-gore": ReportCategory.VIOLENCE_GORE,
    "adult-content": ReportCategory.ADULT_CONTENT,
}


class Slug(RootValueObject[str]):
    """URL-safe slug for artbooks.

    Must be lowercase, alphanumeric with hyphens, 1-100 characters.
    Examples: 'the-brave-little-fox', 'the-brave-little-fox-2'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Slug must be 1-100 characters")
        return v
