"""
Common tab definitions for content-type forms.

Reusable tab structures that repeat across content types. Each call
returns new objects, so a caller may adjust what it gets back without
affecting anyone else.
"""

from collections.abc import Mapping
from types import MappingProxyType

from writecraft_forms.models.content_config import TabConfig
from writecraft_forms.models.field_metadata import FieldType
from writecraft_forms.models.form_output import FormConfig, FormField, FormTabConfig
from writecraft_forms.templates.field_definitions import (
    create_basic_info_fields,
    create_history_field,
    create_physical_fields,
    create_preset_field,
    create_relationship_fields,
    create_value_fields,
)

# Tab presets for schema-driven configs
COMMON_TABS: Mapping[str, TabConfig] = MappingProxyType(
    {
        "basic": TabConfig(id="basic", label="Basic Info", icon="User", order=1),
        "appearance": TabConfig(id="appearance", label="Appearance", icon="Eye", order=2),
        "personality": TabConfig(id="personality", label="Personality", icon="Heart", order=3),
        "background": TabConfig(id="background", label="Background", icon="BookOpen", order=4),
        "skills": TabConfig(id="skills", label="Skills & Abilities", icon="Zap", order=5),
        "relationships": TabConfig(id="relationships", label="Relationships", icon="Users", order=6),
        "details": TabConfig(id="details", label="Details", icon="FileText", order=7),
        "advanced": TabConfig(id="advanced", label="Advanced", icon="Settings", order=8),
    }
)


def create_basic_info_tab(
    content_type: str,
    type_options: tuple[str, ...] | list[str] | None = None,
    icon: str = "Info",
) -> FormTabConfig:
    """
    Create a basic info tab, the most common tab across content types.

    Args:
        content_type: The content type, e.g. ``"weapon"``.
        type_options: Optional options for a ``<contentType>Type`` select.
        icon: Icon name for the tab.
    """
    return FormTabConfig(
        id="basic",
        label="Basic Info",
        icon=icon,
        fields=create_basic_info_fields(content_type, type_options),
    )


def create_physical_tab(content_type: str) -> FormTabConfig:
    """Create a physical properties tab for tangible objects."""
    return FormTabConfig(
        id="physical",
        label="Physical Properties",
        icon="Package",
        fields=create_physical_fields(content_type),
    )


def create_history_tab(content_type: str) -> FormTabConfig:
    """Create a history and lore tab for background information."""
    return FormTabConfig(
        id="history",
        label="History & Lore",
        icon="BookOpen",
        fields=[
            create_history_field(content_type),
            create_preset_field(
                "culturalSignificance",
                placeholder=f"The cultural importance and meaning of this {content_type}...",
                description=f"How this {content_type} is viewed and used in society",
            ),
            FormField(
                name="legends",
                label="Legends & Stories",
                type=FieldType.TEXTAREA,
                placeholder=f"Famous stories and legends about this {content_type}...",
                description=f"Notable tales, myths, or historical events involving this {content_type}",
            ),
        ],
    )


def create_value_tab() -> FormTabConfig:
    """Create a value and economics tab for tradeable items."""
    return FormTabConfig(
        id="value",
        label="Value & Economics",
        icon="DollarSign",
        fields=[
            *create_value_fields(),
            FormField(
                name="availability",
                label="Availability",
                type=FieldType.TEXT,
                placeholder="Common in cities, rare in wilderness, etc.",
                description="Where and how easily this can be obtained",
            ),
            FormField(
                name="tradability",
                label="Trade Information",
                type=FieldType.TEXTAREA,
                placeholder="Trading restrictions, preferred currencies, market conditions...",
                description="Important information about buying, selling, and trading",
            ),
        ],
    )


def create_relationships_tab() -> FormTabConfig:
    return FormTabConfig(
        id="relationships",
        label="Relationships",
        icon="Users",
        fields=create_relationship_fields(),
    )


def create_stats_tab(content_type: str) -> FormTabConfig:
    """Create a stats and mechanics tab for game-related properties."""
    return FormTabConfig(
        id="stats",
        label="Stats & Mechanics",
        icon="Zap",
        fields=[
            FormField(
                name="damage",
                label="Damage",
                type=FieldType.TEXT,
                placeholder="Damage rating or dice (e.g., 1d8+2)",
                description="Damage dealt by this item",
            ),
            FormField(
                name="range",
                label="Range",
                type=FieldType.TEXT,
                placeholder="Melee, 100 feet, etc.",
                description="Effective range of use",
            ),
            FormField(
                name="requirements",
                label="Requirements",
                type=FieldType.TEXT,
                placeholder="Strength needed, training required, etc.",
                description="Prerequisites for using this item",
            ),
            FormField(
                name="maintenance",
                label="Maintenance",
                type=FieldType.TEXTAREA,
                placeholder=f"How to care for and maintain this {content_type}...",
                description="Upkeep requirements and care instructions",
            ),
        ],
    )


def create_abilities_tab(content_type: str) -> FormTabConfig:
    """Create an abilities and powers tab for special capabilities."""
    return FormTabConfig(
        id="abilities",
        label="Abilities & Powers",
        icon="Sparkles",
        fields=[
            create_preset_field(
                "abilities",
                label="Special Abilities",
                placeholder="flight, fire resistance, telepathy...",
                description="Special abilities or powers (comma-separated)",
            ),
            FormField(
                name="enchantments",
                label="Enchantments",
                type=FieldType.TAGS,
                placeholder="fire damage, glowing, self-repairing...",
                description="Magical properties and enchantments (comma-separated)",
            ),
            FormField(
                name="limitations",
                label="Limitations",
                type=FieldType.TEXTAREA,
                placeholder=f"Restrictions, drawbacks, or limitations of this {content_type}...",
                description="Any restrictions or negative aspects",
            ),
        ],
    )


# Tab sets


def create_item_tab_set(content_type: str, type_options: tuple[str, ...] | list[str]) -> list[FormTabConfig]:
    """Standard tabs for physical items (weapons, armour, tools, etc.)."""
    return [
        create_basic_info_tab(content_type, type_options),
        create_stats_tab(content_type),
        create_physical_tab(content_type),
        create_abilities_tab(content_type),
        create_value_tab(),
        create_history_tab(content_type),
    ]


def create_creature_tab_set(content_type: str, type_options: tuple[str, ...] | list[str]) -> list[FormTabConfig]:
    """Standard tabs for creatures and beings."""
    return [
        create_basic_info_tab(content_type, type_options),
        FormTabConfig(
            id="physical",
            label="Physical Description",
            icon="Eye",
            fields=[
                FormField(
                    name="physicalDescription",
                    label="Physical Description",
                    type=FieldType.TEXTAREA,
                    placeholder=f"Describe the physical appearance of this {content_type}...",
                    description="Detailed description of physical characteristics",
                ),
                FormField(
                    name="size",
                    label="Size",
                    type=FieldType.TEXT,
                    placeholder="Small, Medium, Large, etc.",
                    description="The size category of this creature",
                ),
                create_preset_field("habitat", placeholder="Forest, desert, underwater, etc."),
            ],
        ),
        FormTabConfig(
            id="behavior",
            label="Behavior & Psychology",
            icon="Brain",
            fields=[
                create_preset_field(
                    "behavior",
                    placeholder=f"How does this {content_type} typically behave...",
                ),
                FormField(
                    name="intelligence",
                    label="Intelligence",
                    type=FieldType.TEXT,
                    placeholder="Animal, Human-like, Genius, etc.",
                    description="Level and type of intelligence",
                ),
                FormField(
                    name="socialStructure",
                    label="Social Structure",
                    type=FieldType.TEXTAREA,
                    placeholder="Pack hunter, solitary, hive mind, etc.",
                    description="How they interact with their own kind",
                ),
            ],
        ),
        create_abilities_tab(content_type),
        create_history_tab(content_type),
    ]


def create_location_tab_set(content_type: str, type_options: tuple[str, ...] | list[str]) -> list[FormTabConfig]:
    """Standard tabs for locations and places."""
    return [
        create_basic_info_tab(content_type, type_options),
        FormTabConfig(
            id="geography",
            label="Geography & Layout",
            icon="Map",
            fields=[
                create_preset_field(
                    "geography",
                    type=FieldType.TEXTAREA,
                    placeholder="The physical layout and geographical features...",
                    description="Terrain, climate, and physical characteristics",
                ),
                FormField(
                    name="size",
                    label="Size",
                    type=FieldType.TEXT,
                    placeholder="Area or dimensions",
                    description="How large this location is",
                ),
                create_preset_field(
                    "landmarks",
                    label="Notable Landmarks",
                    placeholder="castle, river, ancient tree...",
                ),
            ],
        ),
        FormTabConfig(
            id="inhabitants",
            label="Inhabitants & Culture",
            icon="Users",
            fields=[
                create_preset_field("population", placeholder="Number and types of inhabitants"),
                create_preset_field(
                    "culture",
                    type=FieldType.TEXTAREA,
                    placeholder="Local customs, traditions, and way of life...",
                ),
                create_preset_field("government", placeholder="Type of governance or leadership"),
            ],
        ),
        create_history_tab(content_type),
    ]


def create_organization_tab_set(content_type: str, type_options: tuple[str, ...] | list[str]) -> list[FormTabConfig]:
    """Standard tabs for organizations and groups."""
    return [
        create_basic_info_tab(content_type, type_options),
        FormTabConfig(
            id="structure",
            label="Structure & Hierarchy",
            icon="Users",
            fields=[
                FormField(
                    name="leadership",
                    label="Leadership",
                    type=FieldType.AUTOCOMPLETE_CHARACTER,
                    placeholder="Search or create leaders...",
                    description="Current leaders of this organization",
                    multiple=True,
                ),
                FormField(
                    name="structure",
                    label="Organizational Structure",
                    type=FieldType.TEXTAREA,
                    placeholder="How the organization is structured and organized...",
                    description="Hierarchy, ranks, departments, and organizational layout",
                ),
                FormField(
                    name="membership",
                    label="Membership",
                    type=FieldType.TEXTAREA,
                    placeholder="Who can join, requirements, member count...",
                    description="Information about membership and joining requirements",
                ),
            ],
        ),
        FormTabConfig(
            id="purpose",
            label="Purpose & Activities",
            icon="Target",
            fields=[
                create_preset_field(
                    "purpose",
                    label="Primary Purpose",
                    placeholder="The main goals and objectives of this organization...",
                ),
                FormField(
                    name="activities",
                    label="Activities",
                    type=FieldType.TEXTAREA,
                    placeholder="Day-to-day activities and operations...",
                    description="What this organization actually does",
                ),
                create_preset_field(
                    "resources",
                    type=FieldType.TEXTAREA,
                    placeholder="Funding, assets, capabilities...",
                    description="Resources, funding sources, and capabilities",
                ),
            ],
        ),
        create_relationships_tab(),
        create_history_tab(content_type),
    ]


def compose_form_config(
    title: str,
    tabs: list[FormTabConfig],
    description: str = "",
    icon: str = "FileText",
) -> FormConfig:
    """Assemble a FormConfig straight from template tabs, dropping empty ones."""
    return FormConfig(
        title=title,
        description=description,
        icon=icon,
        tabs=[tab for tab in tabs if tab.fields],
    )
