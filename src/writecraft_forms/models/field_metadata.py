"""
Field metadata models for schema analysis.

This module holds the per-field record the Schema Analyzer emits, the
widget tag enum, and the tagged-union node types the analyzer walks.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field


AUTOCOMPLETE_PREFIX = "autocomplete"


class FieldType(str, Enum):
    """Widget tag assigned to a form field."""

    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    CHECKBOX = "checkbox"
    DATE = "date"
    IMAGE = "image"
    TAGS = "tags"
    SELECT = "select"
    AUTOCOMPLETE = "autocomplete"
    AUTOCOMPLETE_LOCATION = "autocomplete-location"
    AUTOCOMPLETE_CHARACTER = "autocomplete-character"
    AUTOCOMPLETE_ORGANIZATION = "autocomplete-organization"
    AUTOCOMPLETE_SPECIES = "autocomplete-species"
    AUTOCOMPLETE_CULTURE = "autocomplete-culture"
    AUTOCOMPLETE_RELIGION = "autocomplete-religion"
    AUTOCOMPLETE_LANGUAGE = "autocomplete-language"
    AUTOCOMPLETE_TRADITION = "autocomplete-tradition"
    AUTOCOMPLETE_WEAPON = "autocomplete-weapon"
    AUTOCOMPLETE_BUILDING = "autocomplete-building"

    @property
    def is_autocomplete(self) -> bool:
        return self.value.startswith(AUTOCOMPLETE_PREFIX)

    @classmethod
    def for_entity(cls, entity: str) -> "FieldType":
        """Get the autocomplete tag for an entity keyword, e.g. ``weapon``."""
        return cls(f"{AUTOCOMPLETE_PREFIX}-{entity}")


class FieldMetadata(BaseModel):
    """Metadata extracted from one declared field of a schema."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Field name as the form sees it")
    type: FieldType = Field(..., description="Resolved widget tag")
    is_required: bool = Field(default=True, description="False if any optional/nullable/default wrapper was seen")
    is_array: bool = Field(default=False, description="Whether the base type is a list")
    is_nullable: bool = Field(default=False, description="Whether a nullable wrapper was seen")
    choices: list[str] | None = Field(default=None, description="Static choices from a Literal or Enum base type")


# Schema nodes -------------------------------------------------------------


@dataclass(frozen=True)
class Primitive:
    """A leaf type: ``string``, ``number``, ``boolean``, ``date`` or ``unknown``."""

    kind: str
    choices: tuple[Any, ...] | None = None


@dataclass(frozen=True)
class OptionalNode:
    """A field that may be left out (pydantic default of ``None``)."""

    inner: "SchemaNode"


@dataclass(frozen=True)
class Nullable:
    """A type that admits ``None``."""

    inner: "SchemaNode"


@dataclass(frozen=True)
class Defaulted:
    """A field carrying a non-``None`` default or default factory."""

    inner: "SchemaNode"
    default: Any = None


@dataclass(frozen=True)
class Array:
    """A list-like type with a single element type."""

    inner: "SchemaNode"


SchemaNode = Union[Primitive, OptionalNode, Nullable, Defaulted, Array]
