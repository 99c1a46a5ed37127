"""
Form Generator.

Combines the field metadata of a schema with a content type's authored UI
hints into a tab-organized ``FormConfig``. The transformation is pure: it
performs no I/O, keeps no state between calls and never mutates its inputs.
"""

import logging
from collections.abc import Iterable

from pydantic import BaseModel

from writecraft_forms.analysis.labels import field_name_to_label, generate_placeholder
from writecraft_forms.analysis.schema_analyzer import analyze_schema
from writecraft_forms.config import FormsConfig, get_config
from writecraft_forms.errors import UnknownTabError
from writecraft_forms.models.content_config import ContentTypeConfig, FieldUIHints, TabConfig
from writecraft_forms.models.field_metadata import FieldMetadata
from writecraft_forms.models.form_output import FormConfig, FormField, FormTabConfig

logger = logging.getLogger(__name__)

# Bookkeeping columns that never appear in an editing form
SYSTEM_FIELDS: frozenset[str] = frozenset(
    {
        "id",
        "userId",
        "notebookId",
        "createdAt",
        "updatedAt",
        "importSource",
        "importExternalId",
    }
)

DEFAULT_ICON = "FileText"
OTHER_DETAILS_LABEL = "Other Details"
GENERAL_TAB_ID = "general"
GENERAL_TAB_LABEL = "General"
GENERAL_TAB_ICON = "Settings"

_NO_HINTS = FieldUIHints()


def generate_form_config(
    schema: type[BaseModel],
    config: ContentTypeConfig,
    *,
    excluded_fields: Iterable[str] = SYSTEM_FIELDS,
    settings: FormsConfig | None = None,
) -> FormConfig:
    """
    Generate a form configuration from a schema and UI hints.

    Args:
        schema: The pydantic model declaring the content type's data shape.
        config: The authored content-type configuration.
        excluded_fields: Field names that are never rendered, whatever the
            hints say. Defaults to the system bookkeeping fields.
        settings: Generation settings. Uses the global config if None.

    Returns:
        A freshly built FormConfig.

    Raises:
        UnknownTabError: If ``settings.strict_tab_hints`` is set and a hint
            names a tab that is neither declared nor the default tab.

    Example:
        >>> form = generate_form_config(CharacterSchema, character_config)
        >>> [tab.id for tab in form.tabs]
        ['basic', 'appearance', ...]
    """
    settings = settings or get_config()
    excluded = frozenset(excluded_fields)

    visible_fields = [
        field
        for field in analyze_schema(schema)
        if not _is_hidden(field, config, excluded)
    ]

    tabs: list[FormTabConfig] = []

    if config.tabs:
        default_tab = config.default_tab or settings.default_tab_id
        fields_by_tab = group_fields_by_tab(visible_fields, config, default_tab, settings)

        # A repeated tab id keeps its first declaration
        declared: dict[str, TabConfig] = {}
        for tab_config in config.tabs:
            declared.setdefault(tab_config.id, tab_config)

        for tab_config in declared.values():
            tab_fields = sort_fields(fields_by_tab.get(tab_config.id, []), config)
            if tab_fields:
                tabs.append(
                    FormTabConfig(
                        id=tab_config.id,
                        label=tab_config.label,
                        icon=tab_config.icon or DEFAULT_ICON,
                        fields=[create_form_field(field, config) for field in tab_fields],
                    )
                )

        # Fields that fell into a default tab the config never declared
        unassigned = fields_by_tab.get(default_tab, [])
        if unassigned and default_tab not in config.tab_ids:
            tabs.append(
                FormTabConfig(
                    id=default_tab,
                    label=OTHER_DETAILS_LABEL,
                    icon=DEFAULT_ICON,
                    fields=[
                        create_form_field(field, config)
                        for field in sort_fields(unassigned, config)
                    ],
                )
            )
    else:
        all_fields = sort_fields(visible_fields, config)
        if all_fields:
            tabs.append(
                FormTabConfig(
                    id=GENERAL_TAB_ID,
                    label=GENERAL_TAB_LABEL,
                    icon=GENERAL_TAB_ICON,
                    fields=[create_form_field(field, config) for field in all_fields],
                )
            )

    return FormConfig(
        title=config.title,
        description=config.description,
        icon=config.icon or DEFAULT_ICON,
        tabs=tabs,
    )


def _is_hidden(field: FieldMetadata, config: ContentTypeConfig, excluded: frozenset[str]) -> bool:
    if field.name in excluded:
        return True
    hints = config.hints_for(field.name)
    return bool(hints and hints.hidden)


def group_fields_by_tab(
    fields: list[FieldMetadata],
    config: ContentTypeConfig,
    default_tab: str,
    settings: FormsConfig,
) -> dict[str, list[FieldMetadata]]:
    """
    Group fields by their assigned tab, keeping declaration order.

    A hint naming a tab that is neither declared nor the default tab is
    rescued into the default tab with a warning, or rejected in strict mode.
    """
    known_tabs = set(config.tab_ids) | {default_tab}
    fields_by_tab: dict[str, list[FieldMetadata]] = {}

    for field in fields:
        hints = config.hints_for(field.name)
        tab = (hints.tab if hints else None) or default_tab

        if tab not in known_tabs:
            if settings.strict_tab_hints:
                raise UnknownTabError(field.name, tab, config.tab_ids)
            logger.warning(
                "Field '%s' in '%s' is hinted to unknown tab '%s'; "
                "placing it in default tab '%s'",
                field.name,
                config.title,
                tab,
                default_tab,
            )
            tab = default_tab

        fields_by_tab.setdefault(tab, []).append(field)

    return fields_by_tab


def sort_fields(fields: list[FieldMetadata], config: ContentTypeConfig) -> list[FieldMetadata]:
    """Sort by ``order`` hint; fields without one keep their relative order at the end."""

    def order_key(field: FieldMetadata) -> tuple[bool, int]:
        hints = config.hints_for(field.name)
        if hints is None or hints.order is None:
            return (True, 0)
        return (False, hints.order)

    return sorted(fields, key=order_key)


def create_form_field(metadata: FieldMetadata, config: ContentTypeConfig) -> FormField:
    """Create a field descriptor, letting authored hints win over heuristics."""
    hints = config.hints_for(metadata.name) or _NO_HINTS

    multiple = hints.multiple
    if metadata.type.is_autocomplete and metadata.is_array:
        multiple = True

    return FormField(
        name=metadata.name,
        label=hints.label or field_name_to_label(metadata.name),
        type=metadata.type,
        required=metadata.is_required,
        placeholder=hints.placeholder or generate_placeholder(metadata.name, metadata.type),
        description=hints.description,
        rows=hints.rows,
        endpoint=hints.endpoint,
        label_field=hints.label_field,
        value_field=hints.value_field,
        multiple=multiple,
        options=list(hints.options) if hints.options is not None else metadata.choices,
    )
