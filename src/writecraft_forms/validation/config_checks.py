"""
Authoring checks for content-type configurations.

The form generator never fails on an inconsistent config; it rescues or
drops what it cannot place. These checks surface those problems while a
content type is being written, so they can be caught in tests instead of
as missing fields on screen.
"""

import re
from collections import Counter
from collections.abc import Iterable

from pydantic import BaseModel

from writecraft_forms.analysis.schema_analyzer import analyze_schema
from writecraft_forms.config import get_config
from writecraft_forms.generation.form_generator import SYSTEM_FIELDS
from writecraft_forms.models.content_config import ContentTypeConfig
from writecraft_forms.models.validation_result import ConfigIssue, ConfigValidationResult

VALID_FIELD_NAME = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")
MAX_FIELD_NAME_LENGTH = 100


def check_field_name(name: str) -> tuple[bool, str | None]:
    """Validate a field name."""
    if not name:
        return False, "Field name cannot be empty"
    if len(name) > MAX_FIELD_NAME_LENGTH:
        return False, "Field name too long"
    if not VALID_FIELD_NAME.match(name):
        return False, "Invalid characters in field name"
    return True, None


def _error(code: str, message: str, field_name: str | None = None, tab_id: str | None = None) -> ConfigIssue:
    return ConfigIssue(severity="error", code=code, message=message, field_name=field_name, tab_id=tab_id)


def _warning(code: str, message: str, field_name: str | None = None, tab_id: str | None = None) -> ConfigIssue:
    return ConfigIssue(severity="warning", code=code, message=message, field_name=field_name, tab_id=tab_id)


def validate_content_type_config(
    schema: type[BaseModel],
    config: ContentTypeConfig,
    *,
    excluded_fields: Iterable[str] = SYSTEM_FIELDS,
) -> ConfigValidationResult:
    """
    Check an authored config against the schema it decorates.

    Errors are problems that make the config wrong: duplicate tab ids,
    hint keys that cannot be field names, non-positive row counts.
    Warnings are problems the generator will quietly work around.

    Args:
        schema: The content type's pydantic model.
        config: The authored configuration.
        excluded_fields: Fields the generator never renders.

    Returns:
        ConfigValidationResult with errors and warnings.
    """
    errors: list[ConfigIssue] = []
    warnings: list[ConfigIssue] = []
    excluded = frozenset(excluded_fields)

    # Tabs
    for tab_id, count in Counter(config.tab_ids).items():
        if count > 1:
            errors.append(_error("duplicate_tab", f"Tab '{tab_id}' is declared {count} times", tab_id=tab_id))

    metadata = {field.name: field for field in analyze_schema(schema)}
    default_tab = config.default_tab or get_config().default_tab_id
    known_tabs = set(config.tab_ids) | {default_tab}

    # Hints
    for name, hints in config.field_hints.items():
        is_valid, reason = check_field_name(name)
        if not is_valid:
            errors.append(_error("invalid_field_name", f"Hint key '{name}': {reason}", field_name=name))
            continue

        if hints.rows is not None and hints.rows < 1:
            errors.append(
                _error("invalid_rows", f"Field '{name}' has non-positive rows: {hints.rows}", field_name=name)
            )

        if name not in metadata:
            warnings.append(
                _warning("unknown_field", f"Hints given for '{name}', which the schema does not declare", field_name=name)
            )
            continue

        if name in excluded:
            warnings.append(
                _warning("system_field", f"Field '{name}' is a system field and is never rendered", field_name=name)
            )

        if config.tabs and hints.tab and hints.tab not in known_tabs:
            warnings.append(
                _warning(
                    "unknown_tab",
                    f"Field '{name}' is hinted to undeclared tab '{hints.tab}'",
                    field_name=name,
                    tab_id=hints.tab,
                )
            )

        if hints.endpoint and not metadata[name].type.is_autocomplete:
            warnings.append(
                _warning(
                    "endpoint_ignored",
                    f"Field '{name}' has an endpoint but is classified as '{metadata[name].type.value}'",
                    field_name=name,
                )
            )

    # Declared tabs that will not be emitted
    populated: set[str] = set()
    for name in metadata:
        hints = config.hints_for(name)
        if name in excluded or (hints and hints.hidden):
            continue
        tab = (hints.tab if hints else None) or default_tab
        populated.add(tab if tab in known_tabs else default_tab)

    for tab_id in dict.fromkeys(config.tab_ids):
        if tab_id not in populated:
            warnings.append(_warning("empty_tab", f"Tab '{tab_id}' has no visible fields", tab_id=tab_id))

    return ConfigValidationResult(
        is_valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )
