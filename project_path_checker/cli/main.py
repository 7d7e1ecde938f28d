#!/usr/bin/env python3
"""
Command-line interface for project-path-checker.

Checks that a project lives in a tooling-friendly location: short path,
no accents, not in a cloud-sync folder, not on the Desktop or in Documents.
"""

from __future__ import annotations

import asyncio
import traceback
from pathlib import Path
from typing import TypeGuard

import pydantic
import typer

from project_path_checker.cli.logger import CLILogger
from project_path_checker.config.base import CheckerSettings, get_settings
from project_path_checker.exceptions import ProjectPathCheckerError
from project_path_checker.protocols import LoggerProtocol, NullLogger
from project_path_checker.schemas.report import CheckReport
from project_path_checker.services.environment import get_special_folders
from project_path_checker.services.messages import (
    Language,
    ViolationFormatter,
    detect_language,
    get_message_lookup,
)
from project_path_checker.services.reporter import PathCheckReporter
from project_path_checker.services.rules import CLOUD_FOLDERS
from project_path_checker.services.session import CheckSession
from project_path_checker.services.simulation import SimulationOptions, get_current_project_path

app = typer.Typer(
    name='project-path-checker',
    help='Check that a project is stored in a suitable folder',
    add_completion=False,
)


def _is_language(value: str) -> TypeGuard[Language]:
    """Type guard for supported message languages."""
    return value in ('en', 'fr')


def _validate_language(value: str | None) -> Language | None:
    """Validate and narrow language for typer callback."""
    if value is None:
        return None
    if _is_language(value):
        return value
    raise typer.BadParameter("Must be 'en' or 'fr'")


def _validate_max_length(value: int | None) -> int | None:
    if value is not None and value <= 0:
        raise typer.BadParameter('Must be greater than 0')
    return value


@app.command()
def check(
    project: Path | None = typer.Argument(None, help='Project directory (default: current)'),
    max_length: int | None = typer.Option(
        None, '--max-length', '-m', help='Maximum path length (default: 90)', callback=_validate_max_length
    ),
    language: str | None = typer.Option(
        None, '--language', '-l', help='Message language: en or fr (default: locale)', callback=_validate_language
    ),
    simulate_desktop: bool = typer.Option(False, '--simulate-desktop', help='Pretend the project is on the Desktop'),
    simulate_documents: bool = typer.Option(False, '--simulate-documents', help='Pretend the project is in Documents'),
    simulate_onedrive: bool = typer.Option(False, '--simulate-onedrive', help='Insert a OneDrive folder in the path'),
    simulate_accents: bool = typer.Option(False, '--simulate-accents', help='Insert an accented folder in the path'),
    simulate_long_path: bool = typer.Option(False, '--simulate-long-path', help='Insert a 100-character folder'),
    json_output: bool = typer.Option(False, '--json', help='Print the report as JSON'),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """Check the project location. Exits with status 1 when the location is not suitable."""
    try:
        settings = get_settings(CheckerSettings)
        simulation = SimulationOptions(
            desktop=simulate_desktop or settings.SIMULATE_DESKTOP,
            documents=simulate_documents or settings.SIMULATE_DOCUMENTS,
            onedrive=simulate_onedrive or settings.SIMULATE_ONEDRIVE,
            accented_path=simulate_accents or settings.SIMULATE_ACCENTED_PATH,
            long_path=simulate_long_path or settings.SIMULATE_LONG_PATH,
        )
    except (pydantic.ValidationError, FileNotFoundError) as e:
        typer.secho(f'Error: {e}', fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    report = asyncio.run(
        _check_async(
            settings=settings,
            project=project,
            max_length=max_length or settings.MAX_PATH_LENGTH,
            language=detect_language(language or settings.LANGUAGE),
            simulation=simulation,
            json_output=json_output,
            verbose=verbose,
        )
    )

    if report.status == 'failed':
        raise typer.Exit(1)


@app.command()
def rules(
    max_length: int | None = typer.Option(
        None, '--max-length', '-m', help='Maximum path length (default: 90)', callback=_validate_max_length
    ),
) -> None:
    """List the placement rules in evaluation order."""
    limit = max_length
    if limit is None:
        try:
            limit = get_settings(CheckerSettings).MAX_PATH_LENGTH
        except (pydantic.ValidationError, FileNotFoundError) as e:
            typer.secho(f'Error: {e}', fg=typer.colors.RED, err=True)
            raise typer.Exit(1)
    typer.echo(f'1. Path length: at most {limit} characters')
    typer.echo('2. No accented characters (à-ÿ, any case)')
    typer.echo(f'3. Not in a cloud-sync folder: {", ".join(CLOUD_FOLDERS)}')
    typer.echo("4. Not in the OS's Documents folder (Windows)")
    typer.echo('5. Not on the Desktop (Windows)')


async def _check_async(
    settings: CheckerSettings,
    project: Path | None,
    max_length: int,
    language: Language,
    simulation: SimulationOptions,
    json_output: bool,
    verbose: bool,
) -> CheckReport:
    """Async implementation of check command."""
    logger: LoggerProtocol = NullLogger() if json_output else CLILogger(verbose=verbose)
    formatter = ViolationFormatter(get_message_lookup(language))

    try:
        if project is not None and not project.is_dir():
            typer.secho(f'Error: Project directory does not exist: {project}', fg=typer.colors.RED, err=True)
            raise typer.Exit(1)

        special_folders = get_special_folders()
        path = get_current_project_path(project, special_folders, simulation)

        if simulation.enabled:
            await logger.info(f'Simulated location: {path}')

        # The success confirmation is rendered below, not logged
        reporter = PathCheckReporter(
            session=CheckSession(),
            formatter=formatter,
            logger=logger,
            show_positive_messages=False,
        )
        report = await reporter.report(path, special_folders, max_length)

    except ProjectPathCheckerError as e:
        typer.secho(f'Error: {e}', fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    except typer.Exit:
        raise
    except Exception as e:
        await logger.error(f'Failed to check project location: {e}')
        if verbose:
            traceback.print_exc()
        raise typer.Exit(1)

    if json_output:
        typer.echo(report.model_dump_json(indent=2))
    elif report.status == 'failed':
        typer.echo()
        typer.secho(report.title or '', fg=typer.colors.RED, bold=True)
        typer.echo(f'  {formatter.current_location(report.path)}')
        typer.echo(f'  {formatter.more_info()}')
    elif settings.SHOW_POSITIVE_MESSAGES:
        typer.secho(f'✓ {formatter.congratulations()}', fg=typer.colors.GREEN)
        typer.echo(f'  {formatter.current_location(report.path)}')
        typer.echo(f'  {formatter.about(settings.APP_NAME, f"Version {settings.VERSION}")}')

    return report


def main() -> None:
    """Entry point for the project-path-checker command."""
    app()


if __name__ == '__main__':
    main()
