"""Unit tests for comment content sanitization."""

import pytest

from artbook.domain.error import ValidationError
from artbook.domain.service import sanitize, sanitize_comment_content


class TestSanitize:
    """Tests for the ordered deny-list sanitizer."""

    def test_strips_markup_tags(self):
        assert sanitize("<b>Lovely</b> drawing") == "Lovely drawing"

    def test_strips_script_protocols_case_insensitive(self):
        assert sanitize("JavaScript:alert(1)") == "alert(1)"
        assert sanitize("vbscript:msgbox") == "msgbox"

    def test_strips_event_handler_attributes(self):
        assert sanitize("onclick=steal() hello") == "steal() hello"

    def test_strips_escaped_script_blocks(self):
        text = "&lt;script&gt;alert('x')&lt;/script&gt;Nice!"
        assert sanitize(text) == "Nice!"

    def test_trims_surrounding_whitespace(self):
        assert sanitize("   Nice!  \n") == "Nice!"

    def test_plain_text_is_unchanged(self):
        assert sanitize("Lovely drawing, 10/10") == "Lovely drawing, 10/10"

    def test_stray_angle_brackets_are_escaped(self):
        assert sanitize("5 > 3 and 2 < 4") == "5 &gt; 3 and 2 &lt; 4"

    def test_unclosed_tag_is_neutralized(self):
        cleaned = sanitize("<img src=x onerror=alert(1)")

        assert "<img" not in cleaned
        assert "onerror" not in cleaned

    def test_removal_cannot_assemble_a_new_protocol(self):
        cleaned = sanitize("javajavascript:script:alert(1)")

        assert "javascript:" not in cleaned.lower()
        assert cleaned == "alert(1)"

    def test_removal_cannot_assemble_a_new_event_handler(self):
        assert "onclick=" not in sanitize("ononclick=click=steal()")

    def test_sanitizing_twice_changes_nothing(self):
        once = sanitize("<b>Tom &amp; Jerry</b> <i onclick=x()>2 < 3</i>")

        assert sanitize(once) == once


class TestSanitizeCommentContent:
    """Tests for length enforcement after sanitization."""

    def test_returns_cleaned_content(self):
        assert sanitize_comment_content("  <i>Nice!</i> ") == "Nice!"

    def test_empty_after_sanitization_is_rejected(self):
        with pytest.raises(ValidationError, match="required"):
            sanitize_comment_content("<script></script>   ")

    def test_whitespace_only_is_rejected(self):
        with pytest.raises(ValidationError):
            sanitize_comment_content("    ")

    def test_exactly_max_length_is_accepted(self):
        assert len(sanitize_comment_content("a" * 1000)) == 1000

    def test_over_max_length_is_rejected(self):
        with pytest.raises(ValidationError, match="1000"):
            sanitize_comment_content("a" * 1001)

    def test_length_is_measured_after_stripping_markup(self):
        content = "<b>" + "a" * 1000 + "</b>"
        assert sanitize_comment_content(content) == "a" * 1000
