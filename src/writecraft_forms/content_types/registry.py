"""
Content Type Registry.

Maps content-type keys to the means of building their form. A key is
either schema-driven (a schema plus authored hints, run through the form
generator) or template-built (a FormConfig composed from tab sets).

Registries are immutable. ``register_content_type`` returns a new registry
instead of changing the one it was given.
"""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Callable, Iterator, Mapping

from pydantic import BaseModel

from writecraft_forms.config import FormsConfig
from writecraft_forms.content_types import configs, schemas
from writecraft_forms.errors import ConfigurationError, UnknownContentTypeError
from writecraft_forms.generation.form_generator import generate_form_config
from writecraft_forms.models.content_config import ContentTypeConfig
from writecraft_forms.models.form_output import FormConfig
from writecraft_forms.templates import field_options
from writecraft_forms.templates.tab_definitions import (
    compose_form_config,
    create_creature_tab_set,
    create_item_tab_set,
    create_location_tab_set,
    create_organization_tab_set,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContentTypeEntry:
    """How to build the form for one content type."""

    key: str
    title: str
    schema: type[BaseModel] | None = None
    config: ContentTypeConfig | None = None
    builder: Callable[[], FormConfig] | None = field(default=None, compare=False)

    @property
    def is_schema_driven(self) -> bool:
        return self.schema is not None

    def build(self, settings: FormsConfig | None = None) -> FormConfig:
        """Build a fresh FormConfig for this content type."""
        if self.schema is not None and self.config is not None:
            return generate_form_config(self.schema, self.config, settings=settings)
        if self.builder is not None:
            return self.builder()
        raise ConfigurationError(f"Content type '{self.key}' has neither a schema nor a builder")


class ContentTypeRegistry:
    """An immutable mapping of content-type key to entry."""

    def __init__(self, entries: Mapping[str, ContentTypeEntry] | None = None):
        self._entries = MappingProxyType(dict(entries or {}))

    def get(self, key: str) -> ContentTypeEntry | None:
        return self._entries.get(key)

    def require(self, key: str) -> ContentTypeEntry:
        """Get an entry, raising UnknownContentTypeError if it is missing."""
        entry = self._entries.get(key)
        if entry is None:
            raise UnknownContentTypeError(key)
        return entry

    def keys(self) -> list[str]:
        return list(self._entries)

    def with_entry(self, entry: ContentTypeEntry) -> "ContentTypeRegistry":
        """Return a new registry with ``entry`` added or replaced."""
        return ContentTypeRegistry({**self._entries, entry.key: entry})

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ContentTypeRegistry({self.keys()!r})"


# Template-built forms


def build_weapon_form() -> FormConfig:
    return compose_form_config(
        "Weapon Editor",
        create_item_tab_set("weapon", field_options.WEAPON_TYPES),
        description="Design weapons, from rusty daggers to legendary blades",
        icon="Sword",
    )


def build_armor_form() -> FormConfig:
    return compose_form_config(
        "Armour Editor",
        create_item_tab_set("armor", field_options.ARMOR_TYPES),
        description="Create protective gear and armour",
        icon="Shield",
    )


def build_item_form() -> FormConfig:
    return compose_form_config(
        "Item Editor",
        create_item_tab_set("item", field_options.ITEM_TYPES),
        description="Create tools, trinkets and artifacts",
        icon="Package",
    )


def build_creature_form() -> FormConfig:
    return compose_form_config(
        "Creature Editor",
        create_creature_tab_set("creature", field_options.CREATURE_TYPES),
        description="Create beasts, monsters and other beings",
        icon="Bug",
    )


def build_settlement_form() -> FormConfig:
    return compose_form_config(
        "Settlement Editor",
        create_location_tab_set("settlement", field_options.SETTLEMENT_TYPES),
        description="Create cities, towns and villages",
        icon="Home",
    )


def build_faction_form() -> FormConfig:
    return compose_form_config(
        "Faction Editor",
        create_organization_tab_set("faction", field_options.FACTION_TYPES),
        description="Create factions and power groups",
        icon="Flag",
    )


_SCHEMA_DRIVEN: tuple[tuple[str, type[BaseModel], ContentTypeConfig], ...] = (
    ("character", schemas.CharacterSchema, configs.CHARACTER_CONFIG),
    ("location", schemas.LocationSchema, configs.LOCATION_CONFIG),
    ("organization", schemas.OrganizationSchema, configs.ORGANIZATION_CONFIG),
    ("species", schemas.SpeciesSchema, configs.SPECIES_CONFIG),
    ("profession", schemas.ProfessionSchema, configs.PROFESSION_CONFIG),
    ("potion", schemas.PotionSchema, configs.POTION_CONFIG),
    ("law", schemas.LawSchema, configs.LAW_CONFIG),
    ("plot", schemas.PlotSchema, configs.PLOT_CONFIG),
    ("prompt", schemas.PromptSchema, configs.PROMPT_CONFIG),
)

_TEMPLATE_BUILT: tuple[tuple[str, str, Callable[[], FormConfig]], ...] = (
    ("weapon", "Weapon Editor", build_weapon_form),
    ("armor", "Armour Editor", build_armor_form),
    ("item", "Item Editor", build_item_form),
    ("creature", "Creature Editor", build_creature_form),
    ("settlement", "Settlement Editor", build_settlement_form),
    ("faction", "Faction Editor", build_faction_form),
)


def _resolve(registry: ContentTypeRegistry | None) -> ContentTypeRegistry:
    return registry if registry is not None else default_registry()


@lru_cache(maxsize=1)
def default_registry() -> ContentTypeRegistry:
    """The registry of built-in content types."""
    entries: dict[str, ContentTypeEntry] = {}
    for key, schema, config in _SCHEMA_DRIVEN:
        entries[key] = ContentTypeEntry(key=key, title=config.title, schema=schema, config=config)
    for key, title, builder in _TEMPLATE_BUILT:
        entries[key] = ContentTypeEntry(key=key, title=title, builder=builder)
    return ContentTypeRegistry(entries)


def get_content_type_entry(
    content_type: str,
    registry: ContentTypeRegistry | None = None,
) -> ContentTypeEntry | None:
    return _resolve(registry).get(content_type)


def get_form_config(
    content_type: str,
    registry: ContentTypeRegistry | None = None,
    settings: FormsConfig | None = None,
) -> FormConfig | None:
    """
    Build the form configuration for a content type.

    Args:
        content_type: Registry key, e.g. ``"character"``.
        registry: Registry to look in. Defaults to the built-in types.
        settings: Generation settings. Uses the global config if None.

    Returns:
        A freshly built FormConfig, or None if the key is unknown.
    """
    entry = get_content_type_entry(content_type, registry)
    if entry is None:
        logger.warning("No form configuration found for content type: %s", content_type)
        return None
    return entry.build(settings)


def available_content_types(registry: ContentTypeRegistry | None = None) -> list[str]:
    """All registered content-type keys, in registration order."""
    return _resolve(registry).keys()


def is_content_type_available(
    content_type: str,
    registry: ContentTypeRegistry | None = None,
) -> bool:
    return content_type in _resolve(registry)


def register_content_type(
    key: str,
    *,
    schema: type[BaseModel] | None = None,
    config: ContentTypeConfig | None = None,
    builder: Callable[[], FormConfig] | None = None,
    title: str | None = None,
    registry: ContentTypeRegistry | None = None,
) -> ContentTypeRegistry:
    """
    Return a new registry with one more content type.

    Pass either ``schema`` and ``config`` for a schema-driven type, or
    ``builder`` for a template-built one.

    Raises:
        ConfigurationError: If neither or both kinds of source are given.
    """
    schema_driven = schema is not None and config is not None
    if schema_driven == (builder is not None):
        raise ConfigurationError(
            f"Content type '{key}' needs either schema and config, or a builder"
        )
    if (schema is None) != (config is None):
        raise ConfigurationError(f"Content type '{key}' needs both a schema and a config")

    base = _resolve(registry)
    if key in base:
        logger.info("Replacing content type: %s", key)

    entry = ContentTypeEntry(
        key=key,
        title=title or (config.title if config is not None else key.title()),
        schema=schema,
        config=config,
        builder=builder,
    )
    return base.with_entry(entry)
