"""User text sanitization.

Before comment content is persisted, an ordered deny list strips markup
and script vectors, then the result is trimmed. Markup is removed with
bleach, which escapes any `&`, `<` and `>` it keeps, so stored text is
safe to render as HTML.

Rules run in order; later rules see the output of earlier ones. The whole
list is reapplied until the text stops changing, so removing one match can
never leave a new one behind.
"""

import re
from typing import Callable, NamedTuple

import bleach

from artbook.domain.error import ValidationError
from artbook.domain.model.comment import MAX_COMMENT_LENGTH


class SanitizeRule(NamedTuple):
    """A named step that removes something from the text."""

    name: str
    apply: Callable[[str], str]


def _remove(pattern: str, flags: int = 0) -> Callable[[str], str]:
    compiled = re.compile(pattern, flags)
    return lambda text: compiled.sub("", text)


def _strip_markup(text: str) -> str:
    return bleach.clean(text, tags=[], strip=True)


SANITIZE_RULES: tuple[SanitizeRule, ...] = (
    SanitizeRule(
        "escaped_script_blocks",
        _remove(r"&lt;script&gt;.*?&lt;/script&gt;", re.IGNORECASE | re.DOTALL),
    ),
    SanitizeRule("markup_tags", _strip_markup),
    SanitizeRule("script_protocols", _remove(r"(?:java|vb)script:", re.IGNORECASE)),
    SanitizeRule("event_handlers", _remove(r"on\w+=", re.IGNORECASE)),
)


def sanitize(text: str, rules: tuple[SanitizeRule, ...] = SANITIZE_RULES) -> str:
    """Apply the rules in order until nothing changes, then trim.

    bleach is stable on its own output and the other rules only remove
    text, so the loop ends.

    Args:
        text: Raw user input
        rules: Ordered deny rules

    Returns:
        Sanitized text (may be empty)
    """
    previous = None
    while text != previous:
        previous = text
        for rule in rules:
            text = rule.apply(text)
    return text.strip()


def sanitize_comment_content(content: str) -> str:
    """Sanitize comment content and enforce its length bounds.

    Raises:
        ValidationError: If the sanitized content is empty or too long
    """
    cleaned = sanitize(content)
    if not cleaned:
        raise ValidationError("Comment content is required")
    if len(cleaned) > MAX_COMMENT_LENGTH:
        raise ValidationError(
            f"Comment must be less than {MAX_COMMENT_LENGTH} characters"
        )
    return cleaned
