"""
Authored content-type configuration models.

These are written by developers once per content type and never
change at runtime, so every model here is frozen.
"""

from pydantic import BaseModel, ConfigDict, Field


class FieldUIHints(BaseModel):
    """UI customization for a single schema field."""

    model_config = ConfigDict(frozen=True)

    label: str | None = Field(default=None, description="Label override")
    placeholder: str | None = Field(default=None, description="Placeholder override")
    description: str | None = Field(default=None, description="Help text")
    rows: int | None = Field(default=None, description="Visible rows for textareas")
    tab: str | None = Field(default=None, description="Tab id this field belongs to")
    order: int | None = Field(default=None, description="Order within the tab")
    hidden: bool = Field(default=False, description="Leave this field out of the form")

    # Autocomplete
    endpoint: str | None = Field(default=None, description="Lookup endpoint for autocomplete fields")
    label_field: str | None = Field(default=None, description="Attribute shown for each suggestion")
    value_field: str | None = Field(default=None, description="Attribute stored for each suggestion")
    multiple: bool | None = Field(default=None, description="Allow more than one selection")

    # Select
    options: list[str] | None = Field(default=None, description="Static option list")


class TabConfig(BaseModel):
    """A tab declared by a content type."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Tab identifier")
    label: str = Field(..., description="Tab label")
    icon: str | None = Field(default=None, description="Icon name")
    order: int | None = Field(default=None, description="Display order")


class ContentTypeConfig(BaseModel):
    """
    Top-level authored configuration for a content type.

    Combines the form's title and icon, the ordered tab list, per-field
    hints and the tab that collects fields without an explicit tab hint.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Form title")
    description: str = Field(default="", description="Form description")
    icon: str | None = Field(default=None, description="Icon name")
    tabs: list[TabConfig] = Field(default_factory=list, description="Declared tabs, in display order")
    field_hints: dict[str, FieldUIHints] = Field(default_factory=dict, description="Hints keyed by field name")
    default_tab: str | None = Field(default=None, description="Tab for fields without a tab hint")

    def hints_for(self, field_name: str) -> FieldUIHints | None:
        """Get the hints for a field, if any were authored."""
        return self.field_hints.get(field_name)

    @property
    def tab_ids(self) -> list[str]:
        return [tab.id for tab in self.tabs]
