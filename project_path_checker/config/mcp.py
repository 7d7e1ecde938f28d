"""
MCP server configuration.

Extends base configuration with MCP-specific settings.
"""

from __future__ import annotations

from project_path_checker.config.base import BasePathCheckerSettings, lazy_settings


class McpServerSettings(BasePathCheckerSettings):
    """MCP server-specific configuration."""

    CHECK_ON_STARTUP: bool = True  # Run the first check as soon as the server starts


# Module-level singleton (lazy-loaded)
settings = lazy_settings(McpServerSettings)
