"""Tests for label and placeholder heuristics."""

import pytest

from writecraft_forms.analysis.labels import field_name_to_label, generate_placeholder
from writecraft_forms.models.field_metadata import FieldType


class TestFieldNameToLabel:
    """Tests for field_name_to_label."""

    @pytest.mark.parametrize(
        "name, label",
        [
            ("firstName", "First Name"),
            ("imageUrl", "Image URL"),
            ("image_url", "Image URL"),
            ("created_at", "Created At"),
            ("apiKey", "API Key"),
            ("id", "ID"),
            ("name", "Name"),
            ("placeOfBirth", "Place Of Birth"),
        ],
    )
    def test_labels(self, name, label):
        """Test splitting, capitalizing and acronym correction."""
        assert field_name_to_label(name) == label


class TestGeneratePlaceholder:
    """Tests for generate_placeholder."""

    @pytest.mark.parametrize(
        "name, field_type, placeholder",
        [
            ("backstory", FieldType.TEXTAREA, "Enter backstory..."),
            ("age", FieldType.NUMBER, "Enter age"),
            ("personality", FieldType.TAGS, "Add personality..."),
            ("homeLocation", FieldType.AUTOCOMPLETE_LOCATION, "Search or select home location..."),
            ("notebookId", FieldType.AUTOCOMPLETE, "Search or select notebook id..."),
            ("dateOfBirth", FieldType.DATE, "Select date of birth"),
            ("rarity", FieldType.SELECT, "Select rarity"),
            ("imageUrl", FieldType.IMAGE, "Upload or enter image URL"),
            ("givenName", FieldType.TEXT, "Enter given name"),
            ("isAlive", FieldType.CHECKBOX, "Enter is alive"),
        ],
    )
    def test_placeholders(self, name, field_type, placeholder):
        """Test the placeholder chosen for each widget type."""
        assert generate_placeholder(name, field_type) == placeholder

    def test_string_tag(self):
        """Test that a raw tag string is accepted."""
        assert generate_placeholder("motto", "text") == "Enter motto"

    def test_unrecognised_tag(self):
        """Test that an unknown tag string gets the generic placeholder."""
        assert generate_placeholder("motto", "color") == "Enter motto"
        assert generate_placeholder("favouriteHue", "") == "Enter favourite hue"
