#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_options.py
"""Unit tests for parser and renderer options."""

from dataclasses import FrozenInstanceError, fields

import pytest

from mdreflow.exceptions import ValidationError
from mdreflow.options import CommonMarkRendererOptions, MarkdownParserOptions


@pytest.mark.unit
class TestCommonMarkRendererOptions:
    """Tests for CommonMarkRendererOptions."""

    def test_defaults(self):
        """Test default option values."""
        options = CommonMarkRendererOptions()
        assert options.width == 65
        assert options.ordered_list_marker == "fixed"
        assert options.escape_fenced_code is True
        assert options.flags == 0

    def test_frozen(self):
        """Test options cannot be modified in place."""
        options = CommonMarkRendererOptions()
        with pytest.raises(FrozenInstanceError):
            options.width = 10  # type: ignore[misc]

    def test_create_updated(self):
        """Test cloning with changes leaves the original untouched."""
        options = CommonMarkRendererOptions()
        narrow = options.create_updated(width=20, ordered_list_marker="sequential")
        assert narrow.width == 20
        assert narrow.ordered_list_marker == "sequential"
        assert options.width == 65

    def test_negative_width_rejected(self):
        """Test width validation."""
        with pytest.raises(ValueError, match="width must be non-negative"):
            CommonMarkRendererOptions(width=-1)

    def test_zero_width_allowed(self):
        """Test width 0 is accepted."""
        assert CommonMarkRendererOptions(width=0).width == 0

    def test_unknown_marker_rejected(self):
        """Test ordered marker validation."""
        with pytest.raises(ValueError, match="ordered_list_marker"):
            CommonMarkRendererOptions(ordered_list_marker="roman")  # type: ignore[arg-type]

    def test_create_updated_validates(self):
        """Test cloning re-runs validation."""
        with pytest.raises(ValueError):
            CommonMarkRendererOptions().create_updated(width=-5)

    def test_every_field_has_help(self):
        """Test every option documents itself."""
        for option in fields(CommonMarkRendererOptions):
            assert option.metadata.get("help")


@pytest.mark.unit
class TestMarkdownParserOptions:
    """Tests for MarkdownParserOptions."""

    def test_defaults(self):
        """Test HTML is preserved by default."""
        assert MarkdownParserOptions().preserve_html is True

    def test_create_updated(self):
        """Test cloning with a change."""
        assert MarkdownParserOptions().create_updated(preserve_html=False).preserve_html is False


@pytest.mark.unit
class TestOptionHelpers:
    """Tests for the shared options mixin."""

    def test_field_help(self):
        """Test help text is read from field metadata."""
        assert "wrap" in CommonMarkRendererOptions.field_help("width")
        assert "HTML" in MarkdownParserOptions.field_help("preserve_html")

    def test_field_help_unknown(self):
        """Test asking for a missing field."""
        with pytest.raises(KeyError):
            CommonMarkRendererOptions.field_help("colour")

    def test_create_updated_rejects_unknown_field(self):
        """Test a misspelled option name is reported."""
        with pytest.raises(ValidationError) as exc_info:
            CommonMarkRendererOptions().create_updated(widht=40)
        assert exc_info.value.parameter_name == "widht"
