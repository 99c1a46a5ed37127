"""
MCP Tool definitions for WriteCraft Forms.

Exposes the content-type registry, the form generator and the config
checks as MCP tools. Handlers are plain synchronous functions returning
JSON-ready dicts; ``dispatch_tool`` routes a call by name.
"""

import logging
from typing import Any, Callable

from writecraft_forms.analysis.schema_analyzer import analyze_schema
from writecraft_forms.content_types.registry import (
    ContentTypeRegistry,
    available_content_types,
    default_registry,
)
from writecraft_forms.errors import WriteCraftFormsError
from writecraft_forms.validation.config_checks import validate_content_type_config

logger = logging.getLogger(__name__)

_CONTENT_TYPE_SCHEMA = {
    "type": "object",
    "properties": {
        "content_type": {
            "type": "string",
            "description": "Content type key, e.g. 'character' or 'weapon'",
        },
    },
    "required": ["content_type"],
}


def list_content_types(registry: ContentTypeRegistry) -> dict[str, Any]:
    """List registered content types and how each form is built."""
    return {
        "content_types": [
            {
                "key": key,
                "title": registry.require(key).title,
                "schema_driven": registry.require(key).is_schema_driven,
            }
            for key in available_content_types(registry)
        ]
    }


def get_form_config(registry: ContentTypeRegistry, content_type: str) -> dict[str, Any]:
    """Build the form configuration for a content type."""
    entry = registry.require(content_type)
    return {"content_type": content_type, "form": entry.build().to_dict()}


def validate_content_type(registry: ContentTypeRegistry, content_type: str) -> dict[str, Any]:
    """Run the authoring checks for a schema-driven content type."""
    entry = registry.require(content_type)
    if not entry.is_schema_driven:
        return {
            "content_type": content_type,
            "is_valid": True,
            "errors": [],
            "warnings": [],
            "message": "Template-built content types have no schema to check against",
        }
    result = validate_content_type_config(entry.schema, entry.config)
    return {"content_type": content_type, **result.model_dump(mode="json")}


def analyze_content_schema(registry: ContentTypeRegistry, content_type: str) -> dict[str, Any]:
    """Return the analyzer's field metadata for a schema-driven content type."""
    entry = registry.require(content_type)
    if not entry.is_schema_driven:
        return {"error": f"Content type '{content_type}' is template-built and has no schema"}
    return {
        "content_type": content_type,
        "fields": [field.model_dump(mode="json") for field in analyze_schema(entry.schema)],
    }


_HANDLERS: dict[str, Callable[..., dict[str, Any]]] = {
    "list_content_types": list_content_types,
    "get_form_config": get_form_config,
    "validate_content_type": validate_content_type,
    "analyze_content_schema": analyze_content_schema,
}


def dispatch_tool(
    name: str,
    arguments: dict[str, Any] | None = None,
    registry: ContentTypeRegistry | None = None,
) -> dict[str, Any]:
    """
    Run a tool by name.

    Errors caused by the request (unknown tool, missing argument, unknown
    content type) come back as ``{"error": ...}`` payloads.

    Args:
        name: Tool name as listed by ``get_mcp_tools``.
        arguments: Tool arguments.
        registry: Registry to serve from. Defaults to the built-in types.

    Returns:
        The tool's JSON-ready result.
    """
    arguments = arguments or {}
    registry = registry if registry is not None else default_registry()

    handler = _HANDLERS.get(name)
    if handler is None:
        return {"error": f"Unknown tool: {name}"}

    if name == "list_content_types":
        return handler(registry)

    content_type = arguments.get("content_type")
    if not isinstance(content_type, str) or not content_type:
        return {"error": "Missing required argument: content_type"}

    try:
        return handler(registry, content_type)
    except WriteCraftFormsError as e:
        logger.warning("Tool %s failed for %s: %s", name, content_type, e)
        return {"error": str(e)}


def get_mcp_tools() -> list[dict]:
    """
    Get MCP tool definitions for registration with MCP server.

    Returns list of tool schemas compatible with MCP protocol.
    """
    return [
        {
            "name": "list_content_types",
            "description": "List the content types that have a form, with their titles.",
            "inputSchema": {"type": "object", "properties": {}},
        },
        {
            "name": "get_form_config",
            "description": """
Build the tab-organized form configuration for a content type.

The result is the JSON a form renderer reads: a title, an icon and an
ordered list of tabs, each with its ordered fields (name, label, widget
type, placeholder and any autocomplete or select wiring).
""".strip(),
            "inputSchema": _CONTENT_TYPE_SCHEMA,
        },
        {
            "name": "validate_content_type",
            "description": "Check a content type's authored UI hints against its schema and report errors and warnings.",
            "inputSchema": _CONTENT_TYPE_SCHEMA,
        },
        {
            "name": "analyze_content_schema",
            "description": "Show the field metadata derived from a content type's schema, before any UI hints apply.",
            "inputSchema": _CONTENT_TYPE_SCHEMA,
        },
    ]
