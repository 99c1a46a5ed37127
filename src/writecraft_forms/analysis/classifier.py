"""
Field type classification rules.

Rules are evaluated top to bottom; the first whose predicate matches
decides the widget tag. Keeping them in a plain table makes the rule set
easy to inspect and to test rule by rule.
"""

from dataclasses import dataclass
from typing import Callable, Iterable

from writecraft_forms.models.field_metadata import FieldType, Primitive

LONG_TEXT_KEYWORDS = (
    "description",
    "content",
    "backstory",
    "history",
    "notes",
    "summary",
    "details",
    "text",
    "message",
)

ENTITY_KEYWORDS = (
    "location",
    "character",
    "organization",
    "species",
    "culture",
    "religion",
    "language",
    "tradition",
    "weapon",
    "building",
)


@dataclass(frozen=True)
class FieldShape:
    """What the classifier knows about a field once its wrappers are gone."""

    name: str
    base: Primitive
    is_array: bool = False

    @property
    def lower_name(self) -> str:
        return self.name.lower()

    @property
    def is_plain_string(self) -> bool:
        return self.base.kind == "string" and not self.base.choices


@dataclass(frozen=True)
class ClassificationRule:
    """A named (predicate, tag) pair."""

    name: str
    predicate: Callable[[FieldShape], bool]
    field_type: FieldType

    def matches(self, shape: FieldShape) -> bool:
        return self.predicate(shape)


def _entity_rule(keyword: str, unless: tuple[str, ...] = ()) -> ClassificationRule:
    def predicate(shape: FieldShape) -> bool:
        name = shape.lower_name
        return keyword in name and not any(word in name for word in unless)

    return ClassificationRule(f"entity:{keyword}", predicate, FieldType.for_entity(keyword))


DEFAULT_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(
        "image",
        lambda s: "image" in s.lower_name and "url" in s.lower_name,
        FieldType.IMAGE,
    ),
    ClassificationRule(
        "date-name",
        lambda s: "date" in s.lower_name or "time" in s.lower_name,
        FieldType.DATE,
    ),
    # Prose fields such as characterDescription stay textareas even when
    # they mention an entity.
    ClassificationRule(
        "long-text",
        lambda s: not s.is_array
        and s.is_plain_string
        and any(kw in s.lower_name for kw in LONG_TEXT_KEYWORDS),
        FieldType.TEXTAREA,
    ),
    *(
        _entity_rule(keyword, unless=("type",) if keyword == "location" else ())
        for keyword in ENTITY_KEYWORDS
    ),
    ClassificationRule(
        "tags",
        lambda s: s.is_array and s.base.kind == "string",
        FieldType.TAGS,
    ),
    ClassificationRule("select", lambda s: bool(s.base.choices), FieldType.SELECT),
    ClassificationRule("number", lambda s: s.base.kind == "number", FieldType.NUMBER),
    ClassificationRule("boolean", lambda s: s.base.kind == "boolean", FieldType.CHECKBOX),
    ClassificationRule("date-kind", lambda s: s.base.kind == "date", FieldType.DATE),
    ClassificationRule("string", lambda s: s.base.kind == "string", FieldType.TEXT),
)


def classify(
    shape: FieldShape,
    rules: Iterable[ClassificationRule] = DEFAULT_RULES,
) -> FieldType:
    """Return the widget tag of the first matching rule, or ``text``."""
    for rule in rules:
        if rule.matches(shape):
            return rule.field_type
    return FieldType.TEXT


def matching_rule(
    shape: FieldShape,
    rules: Iterable[ClassificationRule] = DEFAULT_RULES,
) -> ClassificationRule | None:
    """Return the first matching rule, for diagnostics."""
    for rule in rules:
        if rule.matches(shape):
            return rule
    return None
