"""
WriteCraft Forms: schema-driven form generation for worldbuilding content.

Turns a content type's pydantic schema plus a small set of authored UI
hints into a tab-organized form description that a renderer can display.

Simple Usage:
    from writecraft_forms import get_form_config

    form = get_form_config("character")
    payload = form.to_dict()

Custom Content Types:
    from writecraft_forms import ContentTypeConfig, FieldUIHints, generate_form_config

    config = ContentTypeConfig(
        title="Spell Editor",
        field_hints={"incantation": FieldUIHints(label="Words of Power", rows=3)},
    )
    form = generate_form_config(SpellSchema, config)

Checking a Config:
    from writecraft_forms import validate_content_type_config

    result = validate_content_type_config(SpellSchema, config)
    for issue in result.warnings:
        print(issue.message)
"""

from writecraft_forms.analysis import (
    analyze_schema,
    field_name_to_label,
    generate_placeholder,
)
from writecraft_forms.config import FormsConfig, get_config, update_config
from writecraft_forms.content_types import (
    ContentTypeRegistry,
    available_content_types,
    default_registry,
    get_content_type_entry,
    get_form_config,
    is_content_type_available,
    register_content_type,
)
from writecraft_forms.errors import (
    ConfigurationError,
    InvalidSchemaError,
    UnknownContentTypeError,
    UnknownTabError,
    WriteCraftFormsError,
)
from writecraft_forms.generation import SYSTEM_FIELDS, generate_form_config, get_form_default_values
from writecraft_forms.models import (
    ConfigValidationResult,
    ContentTypeConfig,
    FieldMetadata,
    FieldType,
    FieldUIHints,
    FormConfig,
    FormField,
    FormTabConfig,
    TabConfig,
)
from writecraft_forms.validation import check_field_name, validate_content_type_config

__all__ = [
    # Main interface
    "generate_form_config",
    "get_form_default_values",
    "get_form_config",
    "analyze_schema",
    # Registry
    "ContentTypeRegistry",
    "default_registry",
    "get_content_type_entry",
    "available_content_types",
    "is_content_type_available",
    "register_content_type",
    # Authored input
    "ContentTypeConfig",
    "FieldUIHints",
    "TabConfig",
    # Output
    "FieldMetadata",
    "FieldType",
    "FormConfig",
    "FormField",
    "FormTabConfig",
    # Checks
    "ConfigValidationResult",
    "check_field_name",
    "validate_content_type_config",
    # Helpers
    "SYSTEM_FIELDS",
    "field_name_to_label",
    "generate_placeholder",
    # Configuration
    "FormsConfig",
    "get_config",
    "update_config",
    # Errors
    "WriteCraftFormsError",
    "ConfigurationError",
    "InvalidSchemaError",
    "UnknownContentTypeError",
    "UnknownTabError",
]

__version__ = "0.1.0"
