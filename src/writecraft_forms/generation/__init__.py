"""
Form generation for WriteCraft Forms.
"""

from writecraft_forms.generation.form_defaults import default_value, get_form_default_values
from writecraft_forms.generation.form_generator import (
    SYSTEM_FIELDS,
    create_form_field,
    generate_form_config,
    group_fields_by_tab,
    sort_fields,
)

__all__ = [
    "SYSTEM_FIELDS",
    "generate_form_config",
    "group_fields_by_tab",
    "sort_fields",
    "create_form_field",
    "get_form_default_values",
    "default_value",
]
