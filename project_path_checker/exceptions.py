"""
Shared exceptions for project-path-checker.

The rule evaluator and check session never raise for well-formed input;
these exceptions belong to the host-side layers that build the inputs.

Exception Hierarchy:
    ProjectPathCheckerError (base)
    ├── ProjectPathResolutionError (project directory cannot be split into parent + name)
    └── SimulationError (simulated location cannot be applied)
        └── SpecialFolderUnavailableError (Desktop/Documents not provided by the OS)
"""

from __future__ import annotations

from pathlib import PurePath


class ProjectPathCheckerError(Exception):
    """Base exception for all project-path-checker errors."""


class ProjectPathResolutionError(ProjectPathCheckerError):
    """Raised when the project directory has no folder name (filesystem root)."""

    def __init__(self, project_dir: PurePath) -> None:
        self.project_dir = project_dir
        super().__init__(f'Cannot determine the project folder name for {project_dir!s}: it is a filesystem root.')


class SimulationError(ProjectPathCheckerError):
    """Base exception for simulated project locations."""


class SpecialFolderUnavailableError(SimulationError):
    """Raised when simulating a Desktop/Documents location on a platform without that folder."""

    def __init__(self, folder: str) -> None:
        self.folder = folder
        super().__init__(
            f'Cannot simulate a project location in the {folder} folder: '
            f'the operating system does not report one (only available on Windows).'
        )
