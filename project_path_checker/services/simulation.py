"""
Simulated project locations.

Rewrites the candidate path before it reaches the rule evaluator so every
warning can be reproduced from a perfectly placed project:

- desktop / documents: move the project under that OS folder (mutually exclusive)
- onedrive: insert a OneDrive folder
- accented_path: insert a folder with an accented name
- long_path: insert a 100-character folder name

Simulations never touch the evaluator or the session; they only change inputs.
"""

from __future__ import annotations

import os
from pathlib import Path, PurePath

import pydantic

from project_path_checker.exceptions import SpecialFolderUnavailableError
from project_path_checker.schemas.base import StrictModel
from project_path_checker.schemas.violations import SpecialFolders
from project_path_checker.services.environment import (
    add_trailing_separator,
    get_project_folder_name,
    get_project_folder_path,
    get_special_folders,
    resolve_project_dir,
)

__all__ = ['SimulationOptions', 'build_candidate_path', 'get_current_project_path']

SIMULATED_CLOUD_FOLDER = 'OneDrive'
SIMULATED_ACCENTED_FOLDER = 'Cégep'
SIMULATED_LONG_FOLDER = '0123456789' * 10


class SimulationOptions(StrictModel):
    """Which simulated locations to apply. All disabled by default."""

    desktop: bool = False
    documents: bool = False
    onedrive: bool = False
    accented_path: bool = False
    long_path: bool = False

    @pydantic.model_validator(mode='after')
    def validate_single_special_folder(self) -> SimulationOptions:
        """A project cannot be simulated on the Desktop and in Documents at once."""
        if self.desktop and self.documents:
            raise ValueError('Simulate either the Desktop or the Documents location, not both')
        return self

    @property
    def enabled(self) -> bool:
        return any((self.desktop, self.documents, self.onedrive, self.accented_path, self.long_path))


def build_candidate_path(
    project_dir: PurePath,
    special_folders: SpecialFolders,
    options: SimulationOptions | None = None,
    sep: str = os.sep,
) -> str:
    """
    Build the path handed to the rule evaluator.

    Args:
        project_dir: Absolute project directory
        special_folders: OS Desktop/Documents paths (needed by desktop/documents simulations)
        options: Simulations to apply (None = real location)
        sep: Path separator of the host OS

    Returns:
        Parent path + simulated folders + project folder name, ending with a separator

    Raises:
        ProjectPathResolutionError: If project_dir is a filesystem root
        SpecialFolderUnavailableError: If a simulated special folder is not reported by the OS

    Examples:
        >>> build_candidate_path(PurePath('/srv/dev/game'), SpecialFolders(), sep='/')
        '/srv/dev/game/'

        >>> build_candidate_path(PurePath('/srv/dev/game'), SpecialFolders(), SimulationOptions(onedrive=True), '/')
        '/srv/dev/OneDrive/game/'
    """
    options = options or SimulationOptions()
    path = get_project_folder_path(project_dir, sep)

    if options.desktop:
        if special_folders.desktop is None:
            raise SpecialFolderUnavailableError('Desktop')
        path = add_trailing_separator(special_folders.desktop, sep)
    elif options.documents:
        if special_folders.documents is None:
            raise SpecialFolderUnavailableError('Documents')
        path = add_trailing_separator(special_folders.documents, sep)

    if options.onedrive:
        path += add_trailing_separator(SIMULATED_CLOUD_FOLDER, sep)
    if options.accented_path:
        path += add_trailing_separator(SIMULATED_ACCENTED_FOLDER, sep)
    if options.long_path:
        path += add_trailing_separator(SIMULATED_LONG_FOLDER, sep)

    return path + add_trailing_separator(get_project_folder_name(project_dir), sep)


def get_current_project_path(
    project_dir: Path | None = None,
    special_folders: SpecialFolders | None = None,
    options: SimulationOptions | None = None,
) -> str:
    """
    Candidate path for the project in project_dir (default: current working directory).

    Special folders are queried from the OS when not provided.
    """
    if special_folders is None:
        special_folders = get_special_folders()
    return build_candidate_path(resolve_project_dir(project_dir), special_folders, options)
