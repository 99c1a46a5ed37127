"""
Schema Analyzer.

Inspects a pydantic model and emits one ``FieldMetadata`` per declared
field, in declaration order. Each field annotation is first turned into a
small tree of schema nodes (optional / nullable / defaulted / array /
primitive); the analyzer then unwraps that tree and hands the base type to
the classifier.

This is a best-effort heuristic: anything it does not recognize becomes a
plain ``text`` field.
"""

import types
import typing
from collections.abc import Sequence, Set
from datetime import date, time
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from writecraft_forms.analysis.classifier import (
    DEFAULT_RULES,
    ClassificationRule,
    FieldShape,
    classify,
)
from writecraft_forms.errors import InvalidSchemaError
from writecraft_forms.models.field_metadata import (
    Array,
    Defaulted,
    FieldMetadata,
    Nullable,
    OptionalNode,
    Primitive,
    SchemaNode,
)

UNKNOWN = Primitive("unknown")

_ARRAY_ORIGINS = (list, set, frozenset, tuple, Sequence, Set)


def _primitive_kind(tp: Any) -> str:
    if tp is bool:
        return "boolean"
    if isinstance(tp, type):
        if issubclass(tp, bool):
            return "boolean"
        if issubclass(tp, (int, float, Decimal)):
            return "number"
        if issubclass(tp, (date, time)):
            return "date"
        if issubclass(tp, str):
            return "string"
    return "unknown"


def type_to_node(tp: Any) -> SchemaNode:
    """Convert a type annotation into a schema node tree."""
    origin = typing.get_origin(tp)
    args = typing.get_args(tp)

    if origin is Annotated:
        return type_to_node(args[0])

    if origin is Union or origin is types.UnionType:
        members = [arg for arg in args if arg is not type(None)]
        inner = type_to_node(members[0]) if len(members) == 1 else UNKNOWN
        if len(members) < len(args):
            return Nullable(inner)
        return inner

    if origin is Literal:
        kinds = {_primitive_kind(type(arg)) for arg in args}
        kind = kinds.pop() if len(kinds) == 1 else "unknown"
        return Primitive(kind, choices=tuple(args))

    if tp in _ARRAY_ORIGINS or origin in _ARRAY_ORIGINS:
        element = args[0] if args else Any
        return Array(type_to_node(element) if element is not Any else UNKNOWN)

    if isinstance(tp, type) and issubclass(tp, Enum):
        values = tuple(member.value for member in tp)
        kinds = {_primitive_kind(type(value)) for value in values}
        kind = kinds.pop() if len(kinds) == 1 else "unknown"
        return Primitive(kind, choices=values)

    kind = _primitive_kind(tp)
    return Primitive(kind) if kind != "unknown" else UNKNOWN


def field_to_node(field_info: FieldInfo) -> SchemaNode:
    """
    Convert a pydantic field into a schema node tree.

    A field defaulting to ``None`` is treated as optional; any other
    default (or a default factory) wraps the type in ``Defaulted``.
    """
    node = type_to_node(field_info.annotation)
    if field_info.is_required():
        return node
    if field_info.default_factory is not None:
        return Defaulted(node, field_info.default_factory)
    if field_info.default is None:
        return OptionalNode(node)
    return Defaulted(node, field_info.default)


def unwrap(node: SchemaNode) -> tuple[Primitive, bool, bool, bool]:
    """
    Unwrap a node tree down to its base primitive.

    Returns:
        ``(base, is_required, is_nullable, is_array)``
    """
    is_required = True
    is_nullable = False
    is_array = False

    while isinstance(node, (OptionalNode, Nullable, Defaulted)):
        is_required = False
        if isinstance(node, Nullable):
            is_nullable = True
        node = node.inner

    if isinstance(node, Array):
        is_array = True
        node = node.inner
        # Element wrappers say nothing about the field itself
        while isinstance(node, (OptionalNode, Nullable, Defaulted)):
            node = node.inner

    base = node if isinstance(node, Primitive) else UNKNOWN
    return base, is_required, is_nullable, is_array


def analyze_node(
    name: str,
    node: SchemaNode,
    rules: tuple[ClassificationRule, ...] = DEFAULT_RULES,
) -> FieldMetadata:
    """Build field metadata for a single named node tree."""
    base, is_required, is_nullable, is_array = unwrap(node)
    field_type = classify(FieldShape(name=name, base=base, is_array=is_array), rules)
    return FieldMetadata(
        name=name,
        type=field_type,
        is_required=is_required,
        is_array=is_array,
        is_nullable=is_nullable,
        choices=[str(choice) for choice in base.choices] if base.choices else None,
    )


def _model_class(schema: Any) -> type[BaseModel]:
    if isinstance(schema, BaseModel):
        return type(schema)
    if isinstance(schema, type) and issubclass(schema, BaseModel):
        return schema
    raise InvalidSchemaError(
        f"Expected a pydantic model class, got {type(schema).__name__}"
    )


def analyze_schema(
    schema: type[BaseModel] | BaseModel,
    *,
    by_alias: bool = True,
    rules: tuple[ClassificationRule, ...] = DEFAULT_RULES,
) -> list[FieldMetadata]:
    """
    Extract field metadata from a pydantic model.

    Args:
        schema: The model class (an instance is accepted too).
        by_alias: Name fields by their alias when one is set, which is how
            the form and the API see them.
        rules: Classification rules, in priority order.

    Returns:
        One ``FieldMetadata`` per declared field, in declaration order.

    Raises:
        InvalidSchemaError: If ``schema`` is not a pydantic model.
    """
    model = _model_class(schema)
    fields: list[FieldMetadata] = []
    for attr_name, field_info in model.model_fields.items():
        name = (field_info.alias or attr_name) if by_alias else attr_name
        fields.append(analyze_node(name, field_to_node(field_info), rules))
    return fields
