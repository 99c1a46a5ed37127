"""Tests for the content-type registry and the built-in content types."""

import logging

import pytest
from pydantic import BaseModel

from writecraft_forms.content_types.registry import (
    ContentTypeRegistry,
    available_content_types,
    default_registry,
    get_content_type_entry,
    get_form_config,
    is_content_type_available,
    register_content_type,
)
from writecraft_forms.errors import ConfigurationError, UnknownContentTypeError
from writecraft_forms.models.content_config import ContentTypeConfig
from writecraft_forms.models.field_metadata import FieldType
from writecraft_forms.models.form_output import FormConfig
from writecraft_forms.templates.field_options import WEAPON_TYPES
from writecraft_forms.validation.config_checks import validate_content_type_config

SCHEMA_DRIVEN = [
    "character",
    "location",
    "organization",
    "species",
    "profession",
    "potion",
    "law",
    "plot",
    "prompt",
]
TEMPLATE_BUILT = ["weapon", "armor", "item", "creature", "settlement", "faction"]


class SpellSchema(BaseModel):
    name: str
    incantation: str | None = None


class TestLookup:
    """Tests for looking up content types."""

    def test_available_types(self):
        """Test that every built-in type is registered."""
        assert available_content_types() == SCHEMA_DRIVEN + TEMPLATE_BUILT

    def test_available_types_is_a_copy(self):
        """Test that the returned list can be changed safely."""
        types = available_content_types()
        types.clear()
        assert len(available_content_types()) == len(SCHEMA_DRIVEN + TEMPLATE_BUILT)

    def test_is_available(self):
        """Test membership checks."""
        assert is_content_type_available("character")
        assert not is_content_type_available("dragon")

    def test_entry(self):
        """Test entry metadata."""
        entry = get_content_type_entry("character")
        assert entry.title == "Character Editor"
        assert entry.is_schema_driven
        assert not get_content_type_entry("weapon").is_schema_driven
        assert get_content_type_entry("dragon") is None

    def test_unknown_type(self, caplog):
        """Test that an unknown type yields None and a warning."""
        with caplog.at_level(logging.WARNING, logger="writecraft_forms.content_types.registry"):
            assert get_form_config("dragon") is None
        assert "dragon" in caplog.text

    def test_require(self):
        """Test strict lookup."""
        with pytest.raises(UnknownContentTypeError) as exc_info:
            default_registry().require("dragon")
        assert str(exc_info.value) == "Unknown content type: dragon"
        assert isinstance(exc_info.value, KeyError)


class TestBuiltInForms:
    """Tests for the forms of built-in content types."""

    @pytest.mark.parametrize("content_type", SCHEMA_DRIVEN + TEMPLATE_BUILT)
    def test_every_type_builds(self, content_type):
        """Test that every type builds a form with non-empty tabs."""
        form = get_form_config(content_type)
        assert isinstance(form, FormConfig)
        assert form.tabs
        assert all(tab.fields for tab in form.tabs)
        names = form.field_names()
        assert "userId" not in names
        assert "createdAt" not in names

    @pytest.mark.parametrize("content_type", SCHEMA_DRIVEN)
    def test_authored_configs_are_clean(self, content_type):
        """Test that built-in configs pass the authoring checks without warnings."""
        entry = get_content_type_entry(content_type)
        result = validate_content_type_config(entry.schema, entry.config)
        assert result.is_valid, result.errors
        assert result.warnings == []

    def test_character_form(self):
        """Test the character layout."""
        form = get_form_config("character")
        assert [tab.id for tab in form.tabs] == [
            "basic",
            "appearance",
            "personality",
            "skills",
            "relationships",
            "background",
        ]
        basic = [f.name for f in form.get_tab("basic").fields]
        assert basic[:4] == ["givenName", "familyName", "middleName", "nickname"]
        assert basic[-2:] == ["pronouns", "genre"]
        assert form.find_field("imageCaption") is None
        assert form.find_field("imageUrl").type is FieldType.IMAGE
        assert form.find_field("dateOfBirth").type is FieldType.DATE
        assert form.find_field("personality").type is FieldType.TAGS

    def test_character_species_autocomplete(self):
        """Test that the species field is wired to its endpoint."""
        species = get_form_config("character").find_field("species")
        assert species.type is FieldType.AUTOCOMPLETE_SPECIES
        assert species.endpoint == "/api/species"
        assert species.multiple is False

    def test_location_type_is_select(self):
        """Test that locationType is a select, not a location lookup."""
        field = get_form_config("location").find_field("locationType")
        assert field.type is FieldType.SELECT
        assert field.label == "Type"

    def test_untabbed_type(self):
        """Test that a type without tabs gets one general tab."""
        form = get_form_config("species")
        assert [tab.id for tab in form.tabs] == ["general"]
        assert form.tabs[0].fields[0].name == "name"

    def test_weapon_form(self):
        """Test a template-built form."""
        form = get_form_config("weapon")
        assert [tab.id for tab in form.tabs] == ["basic", "stats", "physical", "abilities", "value", "history"]
        weapon_type = form.find_field("weaponType")
        assert weapon_type.options == list(WEAPON_TYPES)

    def test_fresh_each_call(self):
        """Test that callers get independent objects."""
        first = get_form_config("weapon")
        first.tabs.clear()
        assert get_form_config("weapon").tabs


class TestRegistration:
    """Tests for registering content types."""

    def test_register_schema_driven(self):
        """Test adding a type without touching the default registry."""
        registry = register_content_type(
            "spell",
            schema=SpellSchema,
            config=ContentTypeConfig(title="Spell Editor"),
        )
        assert "spell" in registry
        assert not is_content_type_available("spell")
        form = get_form_config("spell", registry=registry)
        assert form.title == "Spell Editor"
        assert form.field_names() == ["name", "incantation"]

    def test_register_builder(self):
        """Test adding a template-built type to an empty registry."""
        registry = register_content_type(
            "note",
            builder=lambda: FormConfig(title="Note"),
            registry=ContentTypeRegistry(),
        )
        assert available_content_types(registry) == ["note"]
        assert get_content_type_entry("note", registry).title == "Note"

    def test_register_requires_one_source(self):
        """Test that a type needs exactly one way of being built."""
        with pytest.raises(ConfigurationError):
            register_content_type("spell")
        with pytest.raises(ConfigurationError):
            register_content_type("spell", schema=SpellSchema)
        with pytest.raises(ConfigurationError):
            register_content_type(
                "spell",
                schema=SpellSchema,
                config=ContentTypeConfig(title="Spell Editor"),
                builder=lambda: FormConfig(title="Spell"),
            )
