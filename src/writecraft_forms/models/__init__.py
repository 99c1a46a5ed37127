"""
Data models for WriteCraft Forms.

This module contains Pydantic models for:
- Field metadata (schema analysis output)
- Content-type configuration (authored input)
- Generated form configuration (output)
- Configuration check results
"""

from writecraft_forms.models.content_config import (
    ContentTypeConfig,
    FieldUIHints,
    TabConfig,
)
from writecraft_forms.models.field_metadata import (
    Array,
    Defaulted,
    FieldMetadata,
    FieldType,
    Nullable,
    OptionalNode,
    Primitive,
    SchemaNode,
)
from writecraft_forms.models.form_output import (
    FormConfig,
    FormField,
    FormTabConfig,
)
from writecraft_forms.models.validation_result import (
    ConfigIssue,
    ConfigValidationResult,
)

__all__ = [
    # Analysis
    "FieldMetadata",
    "FieldType",
    "SchemaNode",
    "Primitive",
    "OptionalNode",
    "Nullable",
    "Defaulted",
    "Array",
    # Authored input
    "ContentTypeConfig",
    "FieldUIHints",
    "TabConfig",
    # Output
    "FormConfig",
    "FormField",
    "FormTabConfig",
    # Checks
    "ConfigIssue",
    "ConfigValidationResult",
]
