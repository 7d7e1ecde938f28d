"""
Output protocol shared by the check reporter and its hosts.

The reporter never prints: it hands each line to a LoggerProtocol, and the
host decides where the line ends up (a terminal, stderr plus the MCP client,
or nowhere).
"""

from __future__ import annotations

from typing import Protocol


class LoggerProtocol(Protocol):
    """
    Async sink for check output.

    Levels as used by PathCheckReporter:
    - warning: one localized explanation per violation
    - info: the one-time congratulations and about line, skipped re-checks
    - error: unexpected failures while checking

    Implementations: DualLogger (mcp/utils.py), CLILogger (cli/logger.py),
    NullLogger (below).
    """

    async def info(self, message: str) -> None: ...
    async def warning(self, message: str) -> None: ...
    async def error(self, message: str) -> None: ...


class NullLogger:
    """Discards every line. Used by `check --json`, where the report is the output."""

    async def info(self, message: str) -> None:
        pass

    async def warning(self, message: str) -> None:
        pass

    async def error(self, message: str) -> None:
        pass
