"""
Tab and field template library.

Pre-populated field and tab literals that content-type configs compose
instead of hand-writing every field.
"""

from writecraft_forms.templates.field_definitions import (
    FIELD_PRESETS,
    GENRE_OPTIONS,
    RARITY_OPTIONS,
    SIZE_OPTIONS,
    create_basic_info_fields,
    create_biology_fields,
    create_description_field,
    create_genre_field,
    create_geographic_fields,
    create_history_field,
    create_name_field,
    create_notebook_field,
    create_physical_fields,
    create_preset_field,
    create_rarity_field,
    create_relationship_fields,
    create_society_fields,
    create_title_field,
    create_type_field,
    create_value_fields,
)
from writecraft_forms.templates.tab_definitions import (
    COMMON_TABS,
    compose_form_config,
    create_abilities_tab,
    create_basic_info_tab,
    create_creature_tab_set,
    create_history_tab,
    create_item_tab_set,
    create_location_tab_set,
    create_organization_tab_set,
    create_physical_tab,
    create_relationships_tab,
    create_stats_tab,
    create_value_tab,
)

__all__ = [
    # Options
    "GENRE_OPTIONS",
    "RARITY_OPTIONS",
    "SIZE_OPTIONS",
    # Fields
    "FIELD_PRESETS",
    "create_preset_field",
    "create_name_field",
    "create_title_field",
    "create_description_field",
    "create_genre_field",
    "create_history_field",
    "create_rarity_field",
    "create_type_field",
    "create_notebook_field",
    # Field groups
    "create_basic_info_fields",
    "create_value_fields",
    "create_physical_fields",
    "create_relationship_fields",
    "create_geographic_fields",
    "create_society_fields",
    "create_biology_fields",
    # Tabs
    "COMMON_TABS",
    "create_basic_info_tab",
    "create_physical_tab",
    "create_history_tab",
    "create_value_tab",
    "create_relationships_tab",
    "create_stats_tab",
    "create_abilities_tab",
    # Tab sets
    "create_item_tab_set",
    "create_creature_tab_set",
    "create_location_tab_set",
    "create_organization_tab_set",
    "compose_form_config",
]
