"""
Host environment queries.

Resolves the candidate path for the current project and the OS special
folders used by the Documents/Desktop rules.

The candidate path is the project's parent directory followed by the project
folder name, always ending with a separator:
    /home/alice/dev/my-game -> '/home/alice/dev/my-game/'
"""

from __future__ import annotations

import os
import sys
from pathlib import Path, PurePath

from project_path_checker.exceptions import ProjectPathResolutionError
from project_path_checker.schemas.violations import SpecialFolders

__all__ = [
    'add_trailing_separator',
    'get_project_folder_name',
    'get_project_folder_path',
    'get_special_folders',
    'resolve_project_dir',
]

# Shell folder ids for SHGetFolderPathW
CSIDL_PERSONAL = 0x0005  # Documents
CSIDL_DESKTOPDIRECTORY = 0x0010


def add_trailing_separator(path: str, sep: str = os.sep) -> str:
    """
    Append a separator unless the path already ends with one.

    Examples:
        >>> add_trailing_separator('/srv/dev', '/')
        '/srv/dev/'

        >>> add_trailing_separator('/srv/dev/', '/')
        '/srv/dev/'
    """
    if not path.endswith(sep):
        path += sep
    return path


def get_project_folder_name(project_dir: PurePath) -> str:
    """
    Return the project's folder name.

    Raises:
        ProjectPathResolutionError: If project_dir is a filesystem root
    """
    if not project_dir.name:
        raise ProjectPathResolutionError(project_dir)
    return project_dir.name


def get_project_folder_path(project_dir: PurePath, sep: str = os.sep) -> str:
    """Return the directory containing the project, with a trailing separator."""
    get_project_folder_name(project_dir)  # Roots have no containing directory
    return add_trailing_separator(str(project_dir.parent), sep)


def get_special_folders() -> SpecialFolders:
    """
    Query the OS for the Desktop and Documents folders.

    Only Windows reports them; on other platforms both are absent and the
    corresponding rules are skipped.
    """
    if sys.platform != 'win32':
        return SpecialFolders()

    return SpecialFolders(
        desktop=_get_windows_folder(CSIDL_DESKTOPDIRECTORY),
        documents=_get_windows_folder(CSIDL_PERSONAL),
    )


def _get_windows_folder(csidl: int) -> str | None:
    """Resolve a shell folder via SHGetFolderPathW (handles redirected/OneDrive-backed folders)."""
    import ctypes
    from ctypes import wintypes

    buffer = ctypes.create_unicode_buffer(wintypes.MAX_PATH)
    hresult = ctypes.windll.shell32.SHGetFolderPathW(None, csidl, None, 0, buffer)  # type: ignore[attr-defined]
    if hresult != 0:
        return None
    return buffer.value or None


def resolve_project_dir(project_dir: Path | None = None) -> Path:
    """Return the absolute project directory, defaulting to the current working directory."""
    return (project_dir or Path.cwd()).resolve()
