"""
Result models for content-type configuration checks.
"""

from typing import Literal

from pydantic import BaseModel, Field


class ConfigIssue(BaseModel):
    """A single problem found in an authored configuration."""

    severity: Literal["error", "warning"] = Field(..., description="Whether the issue blocks the config")
    code: str = Field(..., description="Machine-readable issue code")
    message: str = Field(..., description="Human-readable message")
    field_name: str | None = Field(default=None, description="Field the issue is about, if any")
    tab_id: str | None = Field(default=None, description="Tab the issue is about, if any")


class ConfigValidationResult(BaseModel):
    """Result of checking a content-type configuration."""

    is_valid: bool = Field(..., description="Whether the config has no errors")
    errors: list[ConfigIssue] = Field(default_factory=list, description="Blocking problems")
    warnings: list[ConfigIssue] = Field(default_factory=list, description="Non-blocking problems")

    @property
    def error_count(self) -> int:
        """Get the number of errors."""
        return len(self.errors)

    def get_field_issues(self, field_name: str) -> list[ConfigIssue]:
        """Get all errors and warnings for a specific field."""
        return [i for i in self.errors + self.warnings if i.field_name == field_name]

    def to_issue_dict(self) -> dict[str, list[str]]:
        """Convert issues to a dict mapping field names to messages."""
        result: dict[str, list[str]] = {}
        for issue in self.errors + self.warnings:
            key = issue.field_name or "__config__"
            if key not in result:
                result[key] = []
            result[key].append(issue.message)
        return result
