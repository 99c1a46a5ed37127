"""
Development-time checks for authored content-type configurations.
"""

from writecraft_forms.validation.config_checks import (
    VALID_FIELD_NAME,
    check_field_name,
    validate_content_type_config,
)

__all__ = [
    "VALID_FIELD_NAME",
    "check_field_name",
    "validate_content_type_config",
]
