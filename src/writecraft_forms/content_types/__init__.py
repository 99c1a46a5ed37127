"""
Built-in content types and the registry that serves their forms.
"""

from writecraft_forms.content_types.registry import (
    ContentTypeEntry,
    ContentTypeRegistry,
    available_content_types,
    default_registry,
    get_content_type_entry,
    get_form_config,
    is_content_type_available,
    register_content_type,
)

__all__ = [
    "ContentTypeEntry",
    "ContentTypeRegistry",
    "available_content_types",
    "default_registry",
    "get_content_type_entry",
    "get_form_config",
    "is_content_type_available",
    "register_content_type",
]
