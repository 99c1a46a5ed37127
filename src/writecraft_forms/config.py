"""
Configuration module for WriteCraft Forms.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@dataclass
class FormsConfig:
    """Configuration settings for WriteCraft Forms."""

    # Form generation
    default_tab_id: str = "general"
    strict_tab_hints: bool = False

    # Logging
    log_level: str = "INFO"

    # MCP Server settings
    mcp_transport: str = "stdio"  # stdio or sse
    mcp_host: str = "0.0.0.0"
    mcp_port: int = 8080

    # Output settings
    indent_json_output: int = 2

    @classmethod
    def from_env(cls) -> "FormsConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        return cls(
            default_tab_id=os.getenv("WRITECRAFT_DEFAULT_TAB", _defaults.default_tab_id),
            strict_tab_hints=os.getenv("WRITECRAFT_STRICT_TAB_HINTS", str(_defaults.strict_tab_hints).lower()).lower() == "true",
            log_level=os.getenv("WRITECRAFT_LOG_LEVEL", _defaults.log_level).upper(),
            mcp_transport=os.getenv("MCP_TRANSPORT", _defaults.mcp_transport),
            mcp_host=os.getenv("MCP_HOST", _defaults.mcp_host),
            mcp_port=int(os.getenv("MCP_PORT", str(_defaults.mcp_port))),
        )


config = FormsConfig.from_env()


def get_config() -> FormsConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> FormsConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
