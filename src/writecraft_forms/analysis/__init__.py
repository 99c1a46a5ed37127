"""
Schema analysis for WriteCraft Forms.

This module contains:
- The Schema Analyzer (pydantic model -> field metadata)
- The ordered classification rule table
- Label and placeholder heuristics
"""

from writecraft_forms.analysis.classifier import (
    DEFAULT_RULES,
    ENTITY_KEYWORDS,
    LONG_TEXT_KEYWORDS,
    ClassificationRule,
    FieldShape,
    classify,
)
from writecraft_forms.analysis.labels import (
    field_name_to_label,
    generate_placeholder,
)
from writecraft_forms.analysis.schema_analyzer import (
    analyze_node,
    analyze_schema,
    field_to_node,
    type_to_node,
    unwrap,
)

__all__ = [
    "analyze_schema",
    "analyze_node",
    "field_to_node",
    "type_to_node",
    "unwrap",
    "classify",
    "ClassificationRule",
    "FieldShape",
    "DEFAULT_RULES",
    "ENTITY_KEYWORDS",
    "LONG_TEXT_KEYWORDS",
    "field_name_to_label",
    "generate_placeholder",
]
