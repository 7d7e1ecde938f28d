"""Command-line interface for project-path-checker."""

from __future__ import annotations

from project_path_checker.cli.main import app, main

__all__ = ['app', 'main']
