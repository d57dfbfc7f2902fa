"""Tests for genschema.core.options — suggested vocabularies."""

from __future__ import annotations

import pytest

from genschema.core.options import (
    DPI_OPTIONS,
    HEIGHT_OPTIONS,
    STYLE_OPTIONS,
    VOCABULARIES,
    WIDTH_OPTIONS,
    is_suggested,
)


class TestVocabularies:
    """Tests for the vocabulary tuples."""

    def test_all_vocabularies_non_empty(self):
        for field, options in VOCABULARIES.items():
            assert options, field

    def test_no_duplicates(self):
        for field, options in VOCABULARIES.items():
            assert len(options) == len(set(options)), field

    def test_known_values_present(self):
        assert "HDR photography (high dynamic range)" in STYLE_OPTIONS
        assert "4096" in WIDTH_OPTIONS
        assert "4320" in HEIGHT_OPTIONS
        assert "300 (Standard Print)" in DPI_OPTIONS

    def test_dimension_labels_start_with_digits(self):
        """Every width, height and dpi label has a leading number."""
        for label in WIDTH_OPTIONS + HEIGHT_OPTIONS + DPI_OPTIONS:
            assert label[0].isdigit(), label


class TestIsSuggested:
    """Tests for is_suggested."""

    def test_known_value(self):
        assert is_suggested("mood", "cozy and comforting") is True

    def test_custom_value(self):
        assert is_suggested("mood", "faintly ominous") is False

    def test_nested_field(self):
        assert is_suggested("camera.focus", "follow focus (keeping a moving subject sharp)") is True

    def test_unknown_field_raises(self):
        with pytest.raises(KeyError):
            is_suggested("scene", "anything")
