"""
Exception types for WriteCraft Forms.

The form pipeline is total over well-formed authored input; these are
raised only for authoring mistakes that a caller asked to be strict about.
"""


class WriteCraftFormsError(Exception):
    """Base class for all WriteCraft Forms errors."""


class ConfigurationError(WriteCraftFormsError, ValueError):
    """An authored content-type configuration is inconsistent."""


class UnknownTabError(ConfigurationError):
    """A field hint points at a tab that is neither declared nor the default."""

    def __init__(self, field_name: str, tab_id: str, declared: list[str]):
        self.field_name = field_name
        self.tab_id = tab_id
        self.declared = declared
        super().__init__(
            f"Field '{field_name}' is hinted to unknown tab '{tab_id}' "
            f"(declared tabs: {', '.join(declared) or 'none'})"
        )


class InvalidSchemaError(ConfigurationError, TypeError):
    """The object passed as a data-shape declaration is not a pydantic model."""


class UnknownContentTypeError(WriteCraftFormsError, KeyError):
    """No content type is registered under the requested key."""

    def __init__(self, content_type: str):
        self.content_type = content_type
        super().__init__(content_type)

    def __str__(self) -> str:
        return f"Unknown content type: {self.content_type}"
