"""Tests for the Form Generator."""

import logging
from typing import Literal

import pytest
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from writecraft_forms.config import FormsConfig
from writecraft_forms.errors import UnknownTabError
from writecraft_forms.generation.form_generator import SYSTEM_FIELDS, generate_form_config
from writecraft_forms.models.content_config import ContentTypeConfig, FieldUIHints, TabConfig
from writecraft_forms.models.field_metadata import FieldType


class HeroSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str | None = None
    user_id: str | None = None
    name: str
    character_description: str
    age: int | None = None
    tags: list[str] = Field(default_factory=list)
    related_characters: list[str] | None = None
    secret_notes: str | None = None
    home_location: str | None = None
    mood: Literal["calm", "angry"] | None = None


VISIBLE = [
    "name",
    "characterDescription",
    "age",
    "tags",
    "relatedCharacters",
    "homeLocation",
    "mood",
]

TABBED = ContentTypeConfig(
    title="Hero Editor",
    description="Create heroes",
    icon="User",
    default_tab="basic",
    tabs=[
        TabConfig(id="basic", label="Basic Info", icon="User"),
        TabConfig(id="details", label="Details"),
        TabConfig(id="extras", label="Extras", icon="Star"),
    ],
    field_hints={
        "name": FieldUIHints(tab="basic", order=2, label="Hero Name"),
        "characterDescription": FieldUIHints(tab="basic", order=1, rows=4),
        "age": FieldUIHints(tab="basic"),
        "tags": FieldUIHints(tab="details", order=1, placeholder="Add a tag"),
        "relatedCharacters": FieldUIHints(tab="details", multiple=False),
        "secretNotes": FieldUIHints(hidden=True),
        "homeLocation": FieldUIHints(
            tab="details",
            order=3,
            endpoint="/api/locations",
            label_field="name",
            value_field="id",
        ),
    },
)


@pytest.fixture
def settings() -> FormsConfig:
    return FormsConfig()


@pytest.fixture
def form(settings):
    return generate_form_config(HeroSchema, TABBED, settings=settings)


class TestTabAssignment:
    """Tests for grouping fields into tabs."""

    def test_every_visible_field_once(self, form):
        """Test that each visible field lands in exactly one tab."""
        names = form.field_names()
        assert len(names) == len(set(names))
        assert sorted(names) == sorted(VISIBLE)

    def test_system_and_hidden_fields_excluded(self, form):
        """Test that system fields and hidden fields never render."""
        names = form.field_names()
        assert "id" not in names
        assert "userId" not in names
        assert "secretNotes" not in names

    def test_empty_tab_omitted(self, form):
        """Test that a declared tab with no fields is left out."""
        assert [tab.id for tab in form.tabs] == ["basic", "details"]

    def test_unhinted_field_goes_to_default_tab(self, form):
        """Test that a field without a tab hint joins the default tab."""
        assert form.get_tab("basic").fields[-1].name == "mood"

    def test_tab_metadata(self, form):
        """Test tab labels and icons, with a fallback icon."""
        assert form.get_tab("basic").icon == "User"
        assert form.get_tab("details").icon == "FileText"
        assert form.title == "Hero Editor"
        assert form.icon == "User"

    def test_custom_exclusions(self, settings):
        """Test replacing the system-field list."""
        form = generate_form_config(HeroSchema, TABBED, excluded_fields=frozenset(), settings=settings)
        names = form.field_names()
        assert "id" in SYSTEM_FIELDS
        assert "id" in names
        assert "userId" in names

    def test_undeclared_default_tab(self, settings):
        """Test that fields left in an undeclared default tab get an extra tab."""
        config = ContentTypeConfig(
            title="Hero Editor",
            tabs=[TabConfig(id="basic", label="Basic Info")],
            field_hints={"name": FieldUIHints(tab="basic")},
        )
        form = generate_form_config(HeroSchema, config, settings=settings)
        assert [tab.id for tab in form.tabs] == ["basic", "general"]
        other = form.get_tab("general")
        assert other.label == "Other Details"
        assert other.fields[0].name == "characterDescription"

    def test_repeated_tab_id_emitted_once(self, settings):
        """Test that a tab id declared twice yields one tab and no duplicate fields."""
        config = ContentTypeConfig(
            title="Hero Editor",
            default_tab="basic",
            tabs=[
                TabConfig(id="basic", label="Basic Info"),
                TabConfig(id="basic", label="Basic Again"),
            ],
        )
        form = generate_form_config(HeroSchema, config, settings=settings)
        assert [tab.id for tab in form.tabs] == ["basic"]
        assert form.tabs[0].label == "Basic Info"
        names = form.field_names()
        assert names.count("name") == 1
        assert len(names) == len(set(names))


class TestOrdering:
    """Tests for ordering fields within a tab."""

    def test_ordered_then_unordered(self, form):
        """Test that ordered fields come first, the rest keep declaration order."""
        assert [f.name for f in form.get_tab("basic").fields] == [
            "characterDescription",
            "name",
            "age",
            "mood",
        ]
        assert [f.name for f in form.get_tab("details").fields] == [
            "tags",
            "homeLocation",
            "relatedCharacters",
        ]

    def test_order_non_decreasing(self, form):
        """Test that explicit orders never go backwards within a tab."""
        for tab in form.tabs:
            orders = [
                TABBED.hints_for(f.name).order
                for f in tab.fields
                if TABBED.hints_for(f.name) and TABBED.hints_for(f.name).order is not None
            ]
            assert orders == sorted(orders)

    def test_huge_order_precedes_unordered(self, settings):
        """Test that an unordered field follows even a very large explicit order."""
        config = ContentTypeConfig(
            title="Hero Editor",
            field_hints={"age": FieldUIHints(order=2**70)},
        )
        form = generate_form_config(HeroSchema, config, settings=settings)
        assert form.field_names()[:2] == ["age", "name"]


class TestNoTabs:
    """Tests for configs that declare no tabs."""

    def test_single_general_tab(self, settings):
        """Test that all visible fields land in one general tab, ordered by hints."""
        config = ContentTypeConfig(
            title="Hero Editor",
            field_hints={
                "age": FieldUIHints(order=1),
                "name": FieldUIHints(order=2),
            },
        )
        form = generate_form_config(HeroSchema, config, settings=settings)
        assert len(form.tabs) == 1
        tab = form.tabs[0]
        assert tab.id == "general"
        assert tab.label == "General"
        assert [f.name for f in tab.fields] == [
            "age",
            "name",
            "characterDescription",
            "tags",
            "relatedCharacters",
            "secretNotes",
            "homeLocation",
            "mood",
        ]

    def test_nothing_visible(self, settings):
        """Test that no tab is emitted when every field is excluded."""
        class OnlySystem(BaseModel):
            id: str | None = None

        form = generate_form_config(OnlySystem, ContentTypeConfig(title="Empty"), settings=settings)
        assert form.tabs == []


class TestOrphanedTabHints:
    """Tests for hints naming a tab that does not exist."""

    CONFIG = ContentTypeConfig(
        title="Hero Editor",
        default_tab="basic",
        tabs=[TabConfig(id="basic", label="Basic Info")],
        field_hints={"age": FieldUIHints(tab="stats")},
    )

    def test_rescued_with_warning(self, settings, caplog):
        """Test that the field is rescued into the default tab and logged."""
        with caplog.at_level(logging.WARNING, logger="writecraft_forms.generation.form_generator"):
            form = generate_form_config(HeroSchema, self.CONFIG, settings=settings)
        assert "age" in [f.name for f in form.get_tab("basic").fields]
        assert "unknown tab 'stats'" in caplog.text

    def test_strict_mode_raises(self):
        """Test that strict mode rejects the config instead."""
        with pytest.raises(UnknownTabError) as exc_info:
            generate_form_config(HeroSchema, self.CONFIG, settings=FormsConfig(strict_tab_hints=True))
        assert exc_info.value.field_name == "age"
        assert exc_info.value.tab_id == "stats"
        assert isinstance(exc_info.value, ValueError)


class TestFieldDescriptors:
    """Tests for the emitted field descriptors."""

    def test_hints_override_heuristics(self, form):
        """Test label, placeholder and rows from hints."""
        name = form.find_field("name")
        assert name.label == "Hero Name"
        assert name.placeholder == "Enter name"
        description = form.find_field("characterDescription")
        assert description.type is FieldType.TEXTAREA
        assert description.required is True
        assert description.rows == 4
        assert form.find_field("tags").placeholder == "Add a tag"

    def test_derived_labels(self, form):
        """Test labels derived from field names."""
        assert form.find_field("homeLocation").label == "Home Location"

    def test_entity_array_is_multiple(self, form):
        """Test that an entity list allows many selections whatever the hint says."""
        related = form.find_field("relatedCharacters")
        assert related.type is FieldType.AUTOCOMPLETE_CHARACTER
        assert related.multiple is True
        assert related.required is False

    def test_autocomplete_wiring(self, form):
        """Test endpoint wiring in the exported payload."""
        payload = form.to_dict()
        details = payload["tabs"][1]["fields"]
        home = next(f for f in details if f["name"] == "homeLocation")
        assert home["endpoint"] == "/api/locations"
        assert home["labelField"] == "name"
        assert home["valueField"] == "id"

    def test_choices_become_options(self, form):
        """Test that a Literal field offers its values."""
        mood = form.find_field("mood")
        assert mood.type is FieldType.SELECT
        assert mood.options == ["calm", "angry"]


class TestPurity:
    """Tests for repeatability of generation."""

    def test_idempotent(self, settings):
        """Test that two runs over the same inputs are deep-equal."""
        first = generate_form_config(HeroSchema, TABBED, settings=settings)
        second = generate_form_config(HeroSchema, TABBED, settings=settings)
        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_config_untouched(self, settings):
        """Test that generation leaves the authored config as it was."""
        before = TABBED.model_dump()
        generate_form_config(HeroSchema, TABBED, settings=settings)
        assert TABBED.model_dump() == before

    def test_fresh_objects(self, settings):
        """Test that changing one result does not leak into the next."""
        first = generate_form_config(HeroSchema, TABBED, settings=settings)
        first.tabs.clear()
        second = generate_form_config(HeroSchema, TABBED, settings=settings)
        assert len(second.tabs) == 2
