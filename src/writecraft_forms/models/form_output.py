"""
Generated form configuration models.

These represent the ready-to-render structure handed to the generic
form component. ``FormConfig.to_dict()`` produces the camelCase payload
the client reads.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from writecraft_forms.models.field_metadata import FieldType


class FormField(BaseModel):
    """Descriptor for a single rendered field."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(..., description="Field key")
    label: str = Field(..., description="Human-readable label")
    type: FieldType = Field(..., description="Widget tag")
    required: bool = Field(default=False, description="Whether the field is required")
    placeholder: str | None = Field(default=None, description="Placeholder text")
    description: str | None = Field(default=None, description="Help text")
    rows: int | None = Field(default=None, description="Visible rows for textareas")

    # Autocomplete
    endpoint: str | None = Field(default=None)
    label_field: str | None = Field(default=None)
    value_field: str | None = Field(default=None)
    multiple: bool | None = Field(default=None)

    # Select
    options: list[str] | None = Field(default=None)


class FormTabConfig(BaseModel):
    """A tab of the generated form."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., description="Tab identifier")
    label: str = Field(..., description="Tab label")
    icon: str = Field(default="FileText", description="Icon name")
    fields: list[FormField] = Field(default_factory=list, description="Fields in display order")


class FormConfig(BaseModel):
    """Complete generated form configuration for a content type."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(..., description="Form title")
    description: str = Field(default="", description="Form description")
    icon: str = Field(default="FileText", description="Icon name")
    tabs: list[FormTabConfig] = Field(default_factory=list, description="Tabs in display order")

    def get_tab(self, tab_id: str) -> FormTabConfig | None:
        """Get a tab by id."""
        for tab in self.tabs:
            if tab.id == tab_id:
                return tab
        return None

    def find_field(self, name: str) -> FormField | None:
        """Get a field by name from whichever tab holds it."""
        for tab in self.tabs:
            for field in tab.fields:
                if field.name == name:
                    return field
        return None

    def field_names(self) -> list[str]:
        """All field names, tab by tab, in display order."""
        return [field.name for tab in self.tabs for field in tab.fields]

    def to_dict(self) -> dict[str, Any]:
        """Export as the JSON payload the form renderer consumes."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
