"""Tests for the tab and field template library."""

import pytest

from writecraft_forms.models.field_metadata import FieldType
from writecraft_forms.models.form_output import FormTabConfig
from writecraft_forms.templates.field_definitions import (
    RARITY_OPTIONS,
    create_basic_info_fields,
    create_biology_fields,
    create_geographic_fields,
    create_name_field,
    create_notebook_field,
    create_preset_field,
    create_relationship_fields,
    create_society_fields,
    create_title_field,
    create_type_field,
)
from writecraft_forms.templates.field_options import WEAPON_TYPES
from writecraft_forms.templates.tab_definitions import (
    COMMON_TABS,
    compose_form_config,
    create_basic_info_tab,
    create_creature_tab_set,
    create_history_tab,
    create_item_tab_set,
    create_location_tab_set,
    create_organization_tab_set,
    create_value_tab,
)


class TestFieldFactories:
    """Tests for single-field factories."""

    def test_name_field(self):
        """Test the required name field."""
        field = create_name_field("weapon")
        assert field.name == "name"
        assert field.label == "Weapon Name"
        assert field.required is True
        assert field.placeholder == "Enter weapon name..."

    def test_overrides(self):
        """Test that keyword overrides replace preset values."""
        field = create_name_field("weapon", placeholder="What is it called?")
        assert field.placeholder == "What is it called?"
        assert field.label == "Weapon Name"

    def test_type_field(self):
        """Test the <contentType>Type select."""
        field = create_type_field("weapon", WEAPON_TYPES)
        assert field.name == "weaponType"
        assert field.type is FieldType.SELECT
        assert field.options == list(WEAPON_TYPES)

    def test_notebook_field(self):
        """Test the notebook picker wiring."""
        payload = create_notebook_field().model_dump(by_alias=True, exclude_none=True)
        assert payload["type"] == "autocomplete"
        assert payload["endpoint"] == "/api/notebooks"
        assert payload["labelField"] == "title"
        assert payload["valueField"] == "id"
        assert payload["multiple"] is False

    def test_presets(self):
        """Test parameterless presets and their overrides."""
        value = create_preset_field("value")
        assert value.label == "Value"
        assert value.type is FieldType.TEXT
        geography = create_preset_field("geography", type=FieldType.TEXTAREA)
        assert geography.type is FieldType.TEXTAREA

    def test_unknown_preset(self):
        """Test that an unknown preset name is rejected."""
        with pytest.raises(KeyError):
            create_preset_field("spaceshipClass")

    def test_field_groups(self):
        """Test the preset groups."""
        assert [f.name for f in create_geographic_fields()] == ["climate", "geography", "terrain"]
        assert [f.name for f in create_society_fields()] == ["population", "government", "economy", "culture"]
        assert [f.name for f in create_biology_fields()] == ["behavior", "diet", "lifespan", "reproduction"]
        relationships = create_relationship_fields()
        assert [f.type for f in relationships] == [
            FieldType.AUTOCOMPLETE_CHARACTER,
            FieldType.AUTOCOMPLETE_CHARACTER,
            FieldType.AUTOCOMPLETE_LOCATION,
        ]
        assert all(f.multiple is False for f in relationships)
        assert create_title_field().required is True

    def test_basic_info_fields(self):
        """Test the type select is inserted after the name only when options are given."""
        assert [f.name for f in create_basic_info_fields("armor")] == ["name", "description", "genre"]
        assert [f.name for f in create_basic_info_fields("armor", ("Light",))] == [
            "name",
            "armorType",
            "description",
            "genre",
        ]


class TestTabFactories:
    """Tests for tab factories and tab sets."""

    def test_common_tabs(self):
        """Test the schema-driven tab presets."""
        assert COMMON_TABS["basic"].label == "Basic Info"
        assert COMMON_TABS["skills"].label == "Skills & Abilities"
        assert [tab.order for tab in COMMON_TABS.values()] == list(range(1, 9))

    def test_common_tabs_read_only(self):
        """Test that the shared presets cannot be replaced or removed."""
        with pytest.raises(TypeError):
            COMMON_TABS["basic"] = COMMON_TABS["details"]
        with pytest.raises(TypeError):
            del COMMON_TABS["advanced"]
        assert COMMON_TABS["basic"].label == "Basic Info"

    def test_basic_info_tab(self):
        """Test the basic info tab."""
        tab = create_basic_info_tab("weapon", WEAPON_TYPES, icon="Sword")
        assert isinstance(tab, FormTabConfig)
        assert tab.id == "basic"
        assert tab.icon == "Sword"
        assert [f.name for f in tab.fields] == ["name", "weaponType", "description", "genre"]

    def test_history_tab(self):
        """Test the history tab is parameterized by content type."""
        tab = create_history_tab("potion")
        assert tab.label == "History & Lore"
        assert [f.name for f in tab.fields] == ["history", "culturalSignificance", "legends"]
        assert "potion" in tab.fields[0].placeholder

    def test_value_tab(self):
        """Test the value tab."""
        tab = create_value_tab()
        assert [f.name for f in tab.fields] == ["rarity", "value", "availability", "tradability"]
        assert tab.fields[0].options == list(RARITY_OPTIONS)

    def test_fresh_objects(self):
        """Test that each call returns independent objects."""
        first = create_value_tab()
        first.fields.clear()
        assert len(create_value_tab().fields) == 4

    @pytest.mark.parametrize(
        "factory, tab_ids",
        [
            (create_item_tab_set, ["basic", "stats", "physical", "abilities", "value", "history"]),
            (create_creature_tab_set, ["basic", "physical", "behavior", "abilities", "history"]),
            (create_location_tab_set, ["basic", "geography", "inhabitants", "history"]),
            (create_organization_tab_set, ["basic", "structure", "purpose", "relationships", "history"]),
        ],
    )
    def test_tab_sets(self, factory, tab_ids):
        """Test the standard tab sets."""
        tabs = factory("thing", ("Other",))
        assert [tab.id for tab in tabs] == tab_ids
        assert tabs[0].fields[1].name == "thingType"

    def test_compose_form_config(self):
        """Test composing a form and dropping empty tabs."""
        empty = FormTabConfig(id="empty", label="Empty")
        form = compose_form_config("Weapon Editor", [create_value_tab(), empty], icon="Sword")
        assert form.title == "Weapon Editor"
        assert form.icon == "Sword"
        assert [tab.id for tab in form.tabs] == ["value"]
