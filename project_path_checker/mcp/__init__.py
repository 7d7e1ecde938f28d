"""MCP server entry point for project-path-checker."""

from __future__ import annotations

from project_path_checker.mcp.server import main, server

__all__ = ['main', 'server']
