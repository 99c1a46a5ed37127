"""
Label and placeholder heuristics.

Turn machine field names into human-readable labels and type-appropriate
placeholder text.
"""

import re

from writecraft_forms.models.field_metadata import FieldType

# Applied per word after title-casing
ACRONYMS: dict[str, str] = {
    "url": "URL",
    "id": "ID",
    "dna": "DNA",
    "ai": "AI",
    "api": "API",
}

_UPPERCASE = re.compile(r"([A-Z])")
_WORD_START = re.compile(r"\b\w")


def field_name_to_label(name: str) -> str:
    """
    Convert a field name to a human-readable label.

    Examples:
        >>> field_name_to_label("firstName")
        'First Name'
        >>> field_name_to_label("image_url")
        'Image URL'
    """
    spaced = _UPPERCASE.sub(r" \1", name).replace("_", " ")
    titled = _WORD_START.sub(lambda m: m.group(0).upper(), spaced)
    words = [ACRONYMS.get(word.lower(), word) for word in titled.split(" ")]
    return " ".join(words).strip()


def generate_placeholder(field_name: str, field_type: FieldType | str) -> str:
    """Generate placeholder text based on field name and type.

    Unrecognised type tags get the generic ``Enter <label>`` text.
    """
    label = field_name_to_label(field_name).lower()
    try:
        field_type = FieldType(field_type)
    except ValueError:
        return f"Enter {label}"

    if field_type == FieldType.TEXTAREA:
        return f"Enter {label}..."
    if field_type == FieldType.NUMBER:
        return f"Enter {label}"
    if field_type == FieldType.TAGS:
        return f"Add {label}..."
    if field_type.is_autocomplete:
        return f"Search or select {label}..."
    if field_type in (FieldType.DATE, FieldType.SELECT):
        return f"Select {label}"
    if field_type == FieldType.IMAGE:
        return "Upload or enter image URL"

    return f"Enter {label}"
