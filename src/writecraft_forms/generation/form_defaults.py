"""
Form default values.

Seeds the initial value of every field in a generated ``FormConfig``,
taking what it can from an existing record.
"""

from collections.abc import Mapping
from typing import Any

from writecraft_forms.models.field_metadata import FieldType
from writecraft_forms.models.form_output import FormConfig, FormField


def get_form_default_values(
    form: FormConfig,
    initial_data: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Build the initial values for a form.

    Every field of every tab gets an entry. A value present in
    ``initial_data`` is used when it fits the widget, otherwise the
    widget's empty value is used.

    Args:
        form: A generated or template-built form configuration.
        initial_data: An existing record keyed by field name, if any.

    Returns:
        A new dict mapping field names to initial values.

    Example:
        >>> get_form_default_values(form, {"tags": "brave, loyal"})["tags"]
        ['brave', 'loyal']
    """
    initial_data = initial_data or {}
    return {
        field.name: default_value(field, initial_data.get(field.name))
        for tab in form.tabs
        for field in tab.fields
    }


def default_value(field: FormField, value: Any = None) -> Any:
    """Return the initial value of one field given its existing value."""
    if field.type == FieldType.NUMBER:
        return value

    if field.type == FieldType.TAGS:
        # Comma-separated text from older records
        if isinstance(value, str):
            return [tag.strip() for tag in value.split(",") if tag.strip()]
        if isinstance(value, list):
            return list(value)
        return []

    if field.type == FieldType.CHECKBOX:
        return value if value is not None else False

    if field.type.is_autocomplete and field.multiple:
        return list(value) if isinstance(value, list) else []

    return value if value is not None else ""
