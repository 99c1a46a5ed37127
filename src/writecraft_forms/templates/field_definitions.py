"""
Common field definitions for content-type forms.

Factories here return fresh ``FormField`` objects; every factory accepts
keyword overrides that replace any of the preset values, e.g.::

    create_name_field("weapon", placeholder="What is it called?")
"""

from typing import Any

from writecraft_forms.models.field_metadata import FieldType
from writecraft_forms.models.form_output import FormField

# Option constants

GENRE_OPTIONS = (
    "Fantasy", "Science Fiction", "Literary Fiction", "Mystery", "Romance",
    "Thriller", "Horror", "Historical Fiction", "Contemporary Fiction", "Crime",
    "Adventure", "Western", "Dystopian", "Post-Apocalyptic", "Steampunk",
    "Cyberpunk", "Space Opera", "Urban Fantasy", "Paranormal Romance",
    "Young Adult", "Comedy", "Drama", "Magical Realism", "Gothic", "Noir",
    "Superhero", "Military", "Alternate History", "Mythology", "Folklore",
    "Other",
)

RARITY_OPTIONS = ("Common", "Uncommon", "Rare", "Very Rare", "Legendary", "Artifact")

DIFFICULTY_OPTIONS = ("Beginner", "Intermediate", "Advanced", "Expert")

EXTENDED_DIFFICULTY_OPTIONS = ("Trivial", "Easy", "Moderate", "Hard", "Extreme", "Legendary")

SOCIAL_STATUS_OPTIONS = ("Low", "Middle", "High", "Nobility")

DEMAND_LEVEL_OPTIONS = ("Low", "Moderate", "High", "Extreme")

STATUS_OPTIONS = ("Living", "Dead", "Constructed", "Evolving", "Extinct", "Revived")

CONDITION_OPTIONS = ("Pristine", "Good", "Fair", "Poor", "Damaged", "Fragmentary", "Ruins")

SIZE_OPTIONS = ("Tiny", "Small", "Medium", "Large", "Huge", "Gargantuan")


# Presets for fields that take no parameters: name -> (label, type, placeholder, description)
FIELD_PRESETS: dict[str, tuple[str, FieldType, str, str]] = {
    "origin": ("Origin", FieldType.TEXT, "Where does it come from?", "Geographic or cultural origin"),
    "purpose": ("Purpose", FieldType.TEXTAREA, "What is its purpose?", "Primary purpose or function"),
    "abilities": ("Abilities", FieldType.TAGS, "Add special abilities", "Special abilities, powers, or skills"),
    "culturalSignificance": (
        "Cultural Significance",
        FieldType.TEXTAREA,
        "Cultural importance and role in society...",
        "Role in culture and society",
    ),
    "symbolism": ("Symbolism", FieldType.TEXTAREA, "What does this symbolize?", "Symbolic meaning and significance"),
    "climate": ("Climate", FieldType.TEXT, "Weather and climate patterns", "Climate and weather conditions"),
    "habitat": ("Habitat", FieldType.TEXT, "Where does it live?", "Natural environment and habitat"),
    "weight": ("Weight", FieldType.TEXT, "3 lbs, heavy, light, etc.", "Physical weight"),
    "cost": ("Cost", FieldType.TEXT, "How expensive is it?", "Economic cost and affordability"),
    "properties": ("Properties", FieldType.TAGS, "Add properties", "Special properties and characteristics"),
    "appearance": ("Appearance", FieldType.TEXT, "What does it look like?", "Visual appearance and characteristics"),
    "behavior": ("Behavior", FieldType.TEXTAREA, "How does it behave?", "Behavioral patterns and temperament"),
    "duration": ("Duration", FieldType.TEXT, "How long does it last?", "Length of time or duration"),
    "effect": ("Effect", FieldType.TEXTAREA, "What effect does it have?", "Primary effect or outcome"),
    "population": ("Population", FieldType.TEXT, "Who lives here?", "Population size and demographics"),
    "government": ("Government", FieldType.TEXT, "How is it governed?", "Political structure and leadership"),
    "economy": ("Economy", FieldType.TEXT, "Economic activities...", "Economic system and primary industries"),
    "culture": ("Culture", FieldType.TEXT, "Cultural characteristics...", "Cultural practices and traditions"),
    "value": ("Value", FieldType.TEXT, "500 gold, priceless, etc.", "The monetary or cultural value"),
    "materials": ("Materials", FieldType.TAGS, "steel, wood, leather...", "Materials used in construction (comma-separated)"),
    "craftsmanship": ("Craftsmanship", FieldType.TEXT, "Masterwork, crude, ornate, etc.", "The quality and style of construction"),
    "geography": ("Geography", FieldType.TEXT, "Geographic features...", "Physical geographic characteristics"),
    "terrain": ("Terrain", FieldType.TAGS, "Add terrain types", "Types of terrain in this area"),
    "diet": ("Diet", FieldType.TEXT, "What does it eat?", "Dietary habits and food sources"),
    "lifespan": ("Lifespan", FieldType.TEXT, "How long does it live?", "Average lifespan and lifecycle"),
    "reproduction": ("Reproduction", FieldType.TEXT, "How does it reproduce?", "Reproductive methods and behaviors"),
    "notableFeatures": ("Notable Features", FieldType.TAGS, "Add notable features", "Distinctive landmarks or characteristics"),
    "landmarks": ("Landmarks", FieldType.TAGS, "Add landmarks", "Important landmarks and points of interest"),
    "resources": ("Resources", FieldType.TAGS, "Add available resources", "Natural resources and materials available"),
    "threats": ("Threats", FieldType.TAGS, "Add potential dangers", "Dangers or threats that exist here"),
}


def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


def _build(defaults: dict[str, Any], overrides: dict[str, Any]) -> FormField:
    return FormField(**{**defaults, **overrides})


def create_preset_field(name: str, **overrides: Any) -> FormField:
    """
    Create one of the parameterless preset fields by name.

    Raises:
        KeyError: If ``name`` is not in ``FIELD_PRESETS``.
    """
    label, field_type, placeholder, description = FIELD_PRESETS[name]
    return _build(
        {
            "name": name,
            "label": label,
            "type": field_type,
            "placeholder": placeholder,
            "description": description,
        },
        overrides,
    )


# Core fields


def create_name_field(content_type: str, **overrides: Any) -> FormField:
    """Create the standard required name field for a content type."""
    return _build(
        {
            "name": "name",
            "label": f"{_capitalize(content_type)} Name",
            "type": FieldType.TEXT,
            "placeholder": f"Enter {content_type} name...",
            "description": f"The name of this {content_type}",
            "required": True,
        },
        overrides,
    )


def create_title_field(**overrides: Any) -> FormField:
    return _build(
        {
            "name": "title",
            "label": "Title",
            "type": FieldType.TEXT,
            "placeholder": "Enter title...",
            "description": "The title of this item",
            "required": True,
        },
        overrides,
    )


def create_description_field(content_type: str, **overrides: Any) -> FormField:
    return _build(
        {
            "name": "description",
            "label": "Description",
            "type": FieldType.TEXTAREA,
            "placeholder": f"Detailed description of the {content_type}...",
            "description": f"What does this {content_type} look like and how does it function?",
        },
        overrides,
    )


def create_genre_field(**overrides: Any) -> FormField:
    return _build(
        {
            "name": "genre",
            "label": "Genre",
            "type": FieldType.SELECT,
            "options": list(GENRE_OPTIONS),
            "placeholder": "Select genre (optional)",
            "description": "The genre or setting type this fits into",
        },
        overrides,
    )


def create_history_field(content_type: str, **overrides: Any) -> FormField:
    return _build(
        {
            "name": "history",
            "label": "History",
            "type": FieldType.TEXTAREA,
            "placeholder": f"The {content_type}'s origin story and past...",
            "description": f"The background and historical significance of this {content_type}",
        },
        overrides,
    )


def create_rarity_field(**overrides: Any) -> FormField:
    return _build(
        {
            "name": "rarity",
            "label": "Rarity",
            "type": FieldType.SELECT,
            "options": list(RARITY_OPTIONS),
            "placeholder": "Select rarity",
            "description": "How rare and valuable this item is",
        },
        overrides,
    )


def create_type_field(content_type: str, type_options: tuple[str, ...] | list[str], **overrides: Any) -> FormField:
    """Create a ``<contentType>Type`` select, e.g. ``weaponType``."""
    return _build(
        {
            "name": f"{content_type}Type",
            "label": f"{_capitalize(content_type)} Type",
            "type": FieldType.SELECT,
            "options": list(type_options),
            "placeholder": f"Select {content_type} type",
            "description": f"What type of {content_type} is this?",
        },
        overrides,
    )


def create_notebook_field(**overrides: Any) -> FormField:
    """Create the notebook picker used to file content into a notebook."""
    return _build(
        {
            "name": "notebookId",
            "label": "Notebook",
            "type": FieldType.AUTOCOMPLETE,
            "endpoint": "/api/notebooks",
            "label_field": "title",
            "value_field": "id",
            "multiple": False,
            "placeholder": "Search or select a notebook...",
            "description": "Which notebook should this be saved in?",
        },
        overrides,
    )


# Field groups


def create_basic_info_fields(
    content_type: str,
    type_options: tuple[str, ...] | list[str] | None = None,
) -> list[FormField]:
    """Name, description and genre, with a type select after the name when options are given."""
    fields = [
        create_name_field(content_type),
        create_description_field(content_type),
        create_genre_field(),
    ]
    if type_options:
        fields.insert(1, create_type_field(content_type, type_options))
    return fields


def create_value_fields() -> list[FormField]:
    return [create_rarity_field(), create_preset_field("value")]


def create_physical_fields(content_type: str) -> list[FormField]:
    return [
        create_preset_field("materials"),
        create_preset_field("craftsmanship"),
        create_preset_field("weight", description=f"Physical weight of the {content_type}"),
    ]


def create_relationship_fields() -> list[FormField]:
    return [
        FormField(
            name="creator",
            label="Creator",
            type=FieldType.AUTOCOMPLETE_CHARACTER,
            placeholder="Search or create creator...",
            description="Who created or invented this",
            multiple=False,
        ),
        FormField(
            name="owner",
            label="Current Owner",
            type=FieldType.AUTOCOMPLETE_CHARACTER,
            placeholder="Search or create owner...",
            description="Who currently owns or controls this",
            multiple=False,
        ),
        FormField(
            name="location",
            label="Current Location",
            type=FieldType.AUTOCOMPLETE_LOCATION,
            placeholder="Search or create location...",
            description="Where this is currently located",
            multiple=False,
        ),
    ]


def create_geographic_fields() -> list[FormField]:
    return [create_preset_field(name) for name in ("climate", "geography", "terrain")]


def create_society_fields() -> list[FormField]:
    return [create_preset_field(name) for name in ("population", "government", "economy", "culture")]


def create_biology_fields() -> list[FormField]:
    return [create_preset_field(name) for name in ("behavior", "diet", "lifespan", "reproduction")]
