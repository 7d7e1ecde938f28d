"""
CLI logger adapter - implements LoggerProtocol for the check command.

Everything the reporter logs goes to stderr, so stdout carries only the
rendered result (or the JSON report) and can be piped.
"""

from __future__ import annotations

import typer


class CLILogger:
    """
    Logger implementation for CLI (implements LoggerProtocol from protocols).

    Violation warnings are always shown, in yellow. Info lines such as the
    simulated location or a skipped re-check only appear with --verbose.
    """

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose

    async def info(self, message: str) -> None:
        if self.verbose:
            typer.echo(f'[INFO] {message}', err=True)

    async def warning(self, message: str) -> None:
        typer.secho(f'[WARNING] {message}', fg=typer.colors.YELLOW, err=True)

    async def error(self, message: str) -> None:
        typer.secho(f'[ERROR] {message}', fg=typer.colors.RED, err=True)
