"""Unit tests for DiffOptions and ExportOptions."""

import dataclasses

import pytest

from textcompare.constants import DEFAULT_MAX_CHAR_DIFF_CELLS
from textcompare.exceptions import ConfigurationError
from textcompare.options import DiffOptions, ExportOptions


@pytest.mark.unit
class TestDiffOptions:
    """Tests for DiffOptions."""

    def test_defaults(self):
        """Test every flag defaults to False."""
        options = DiffOptions()
        assert not any(
            getattr(options, name)
            for name in (
                "ignore_case",
                "ignore_whitespace",
                "ignore_punctuation",
                "split_by_paragraph",
                "split_by_sentence",
                "use_web_worker",
            )
        )
        assert options.max_char_diff_cells == DEFAULT_MAX_CHAR_DIFF_CELLS
        assert not options.segmented

    def test_frozen(self):
        """Test options are immutable."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            DiffOptions().ignore_case = True  # type: ignore[misc]

    def test_create_updated(self):
        """Test create_updated returns a modified copy."""
        original = DiffOptions()
        updated = original.create_updated(split_by_sentence=True)
        assert updated.split_by_sentence is True
        assert updated.segmented
        assert original.split_by_sentence is False

    def test_non_positive_cell_limit(self):
        """Test the cell limit must be positive."""
        with pytest.raises(ValueError, match="must be positive"):
            DiffOptions(max_char_diff_cells=0)

    def test_every_field_has_help(self):
        """Test each field documents itself for the CLI."""
        assert all(field.metadata.get("help") for field in dataclasses.fields(DiffOptions))

    def test_dict_round_trip(self):
        """Test to_dict and from_dict are inverse."""
        options = DiffOptions(ignore_case=True, split_by_paragraph=True, max_char_diff_cells=10)
        assert DiffOptions.from_dict(options.to_dict()) == options

    def test_from_dict_missing_keys_default(self):
        """Test absent keys take their defaults."""
        assert DiffOptions.from_dict({}) == DiffOptions()

    def test_from_dict_not_a_mapping(self):
        """Test a non-mapping payload is rejected."""
        with pytest.raises(ConfigurationError, match="must be decoded from a mapping"):
            DiffOptions.from_dict(["ignore_case"])  # type: ignore[arg-type]

    def test_from_dict_unknown_key(self):
        """Test unknown keys are rejected with the key recorded."""
        with pytest.raises(ConfigurationError) as exc_info:
            DiffOptions.from_dict({"ignore_accents": True})
        assert exc_info.value.parameter_name == "ignore_accents"

    @pytest.mark.parametrize("value", ["true", 1, None])
    def test_from_dict_flag_type(self, value):
        """Test boolean flags must be real booleans."""
        with pytest.raises(ConfigurationError, match="must be of type bool"):
            DiffOptions.from_dict({"ignore_case": value})

    def test_from_dict_cell_limit_rejects_bool(self):
        """Test a boolean is not accepted as the cell limit."""
        with pytest.raises(ConfigurationError, match="must be of type int"):
            DiffOptions.from_dict({"max_char_diff_cells": True})

    def test_from_dict_cell_limit_range(self):
        """Test an out-of-range cell limit becomes a ConfigurationError."""
        with pytest.raises(ConfigurationError, match="must be positive") as exc_info:
            DiffOptions.from_dict({"max_char_diff_cells": -5})
        assert isinstance(exc_info.value.original_error, ValueError)

    def test_from_json(self):
        """Test decoding from a JSON object."""
        assert DiffOptions.from_json('{"ignore_punctuation": true}') == DiffOptions(ignore_punctuation=True)

    def test_from_json_invalid(self):
        """Test malformed JSON is a ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            DiffOptions.from_json("{ignore_case: true}")


@pytest.mark.unit
class TestExportOptions:
    """Tests for ExportOptions."""

    def test_defaults(self):
        """Test default report settings."""
        options = ExportOptions()
        assert options.format == "text"
        assert options.include_stats is True
        assert options.include_timestamp is True
        assert options.include_equal is False
        assert options.title == "Text Comparison Report"
        assert options.add_color == "#22c55e"

    def test_unknown_format(self):
        """Test unknown formats are rejected."""
        with pytest.raises(ValueError, match="format must be one of"):
            ExportOptions(format="pdf")  # type: ignore[arg-type]

    @pytest.mark.parametrize("color", ["green", "#fff", "#12345g", "22c55e"])
    def test_invalid_color(self, color):
        """Test colors must be #rrggbb."""
        with pytest.raises(ValueError, match="#rrggbb"):
            ExportOptions(add_color=color)

    def test_from_dict_invalid_format(self):
        """Test a bad format in a mapping becomes a ConfigurationError."""
        with pytest.raises(ConfigurationError, match="format must be one of"):
            ExportOptions.from_dict({"format": "docx"})

    def test_from_dict(self):
        """Test decoding a partial mapping."""
        options = ExportOptions.from_dict({"format": "html", "modify_color": "#abcdef"})
        assert options.format == "html"
        assert options.modify_color == "#abcdef"
