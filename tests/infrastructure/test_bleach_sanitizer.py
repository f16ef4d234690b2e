"""Tests for BleachSanitizer."""

from webmud.infrastructure.sanitizer import DEFAULT_ALLOWED, BleachSanitizer


class TestBleachSanitizer:
    """Tests for the allow-list sanitizer."""

    def test_default_allow_list(self):
        """Test only span and br are allowed by default."""
        assert BleachSanitizer().allowed_tags == frozenset(DEFAULT_ALLOWED)
        assert BleachSanitizer().allowed_tags == {"span", "br"}

    def test_empty_text(self, bleach_sanitizer):
        """Test empty input stays empty."""
        assert bleach_sanitizer.sanitize("") == ""

    def test_plain_text_unchanged(self, bleach_sanitizer):
        """Test text without markup passes through."""
        assert bleach_sanitizer.sanitize("You are standing in a field.") == (
            "You are standing in a field."
        )

    def test_span_class_kept(self, bleach_sanitizer):
        """Test styled spans survive."""
        text = '<span class="tnc_green">Exits: north</span>'
        assert bleach_sanitizer.sanitize(text) == text

    def test_line_break_kept(self, bleach_sanitizer):
        """Test br survives."""
        assert "<br>" in bleach_sanitizer.sanitize("a<br>b")

    def test_script_escaped(self, bleach_sanitizer):
        """Test script tags are escaped, not executed."""
        result = bleach_sanitizer.sanitize("<script>alert(1)</script>")

        assert "<script>" not in result
        assert "&lt;script&gt;" in result

    def test_disallowed_attribute_removed(self, bleach_sanitizer):
        """Test event handler attributes are dropped from allowed tags."""
        result = bleach_sanitizer.sanitize('<span class="x" onclick="evil()">hi</span>')

        assert "onclick" not in result
        assert 'class="x"' in result

    def test_custom_allow_list(self):
        """Test a custom allow-list replaces the default."""
        sanitizer = BleachSanitizer({"b": []})

        assert sanitizer.sanitize("<b>bold</b>") == "<b>bold</b>"
        assert "&lt;span" in sanitizer.sanitize('<span class="x">s</span>')
