"""
Rule evaluator - classifies a project location against the placement rules.

Rules (all applied, results accumulate in this order):
1. Length - path longer than max_length
2. Accents - any accented Latin letter (à-ÿ, case-insensitive)
3. Cloud folders - OneDrive, Dropbox, Google, apple~Cloud substrings (case-insensitive)
4. Documents - path starts with the OS Documents folder (when reported)
5. Desktop - path starts with the OS Desktop folder (when reported)

The evaluator is a pure function: no I/O, no state, safe to call from any thread.
"""

from __future__ import annotations

import re

from project_path_checker.schemas.violations import (
    AccentedCharacters,
    CheckResult,
    CloudFolder,
    DocumentsFolder,
    OnDesktop,
    PathTooLong,
    SpecialFolders,
    ViolationReason,
)

__all__ = ['ACCENTED_CHARACTERS', 'CLOUD_FOLDERS', 'DEFAULT_MAX_PATH_LENGTH', 'RULE_ORDER', 'evaluate']

# Leaves roughly 170 characters for files nested deep inside build/cache folders
DEFAULT_MAX_PATH_LENGTH = 90

# Matched literally; decomposed Unicode (e + combining accent) does not match
ACCENTED_CHARACTERS = re.compile('[àáâãäåæçèéêëìíîïðñòóôõöøùúûüýþÿ]', re.IGNORECASE)

# Order is significant: reasons are emitted in this order
CLOUD_FOLDERS = ('OneDrive', 'Dropbox', 'Google', 'apple~Cloud')

RULE_ORDER = ('path_too_long', 'accented_characters', 'cloud_folder', 'documents_folder', 'on_desktop')


def evaluate(
    path: str,
    special_folders: SpecialFolders,
    max_length: int = DEFAULT_MAX_PATH_LENGTH,
) -> CheckResult:
    """
    Evaluate every placement rule against a candidate project path.

    Args:
        path: Absolute directory path of the project (trailing separator included)
        special_folders: OS Desktop/Documents paths; absent entries skip their rule
        max_length: Maximum allowed number of characters

    Returns:
        CheckResult with the violated rules, empty when the location is suitable

    Examples:
        >>> evaluate('/srv/dev/proj/', SpecialFolders()).ok
        True

        >>> evaluate('/home/alice/Dropbox/Google/proj/', SpecialFolders()).kinds
        ('cloud_folder', 'cloud_folder')
    """
    reasons: list[ViolationReason] = []

    if len(path) > max_length:
        reasons.append(PathTooLong(length=len(path), max_length=max_length))

    if has_accented_characters(path):
        reasons.append(AccentedCharacters())

    reasons.extend(CloudFolder(name=name) for name in find_cloud_folders(path))

    if special_folders.documents and _starts_with(path, special_folders.documents):
        reasons.append(DocumentsFolder())

    if special_folders.desktop and _starts_with(path, special_folders.desktop):
        reasons.append(OnDesktop())

    return CheckResult(path=path, max_length=max_length, reasons=tuple(reasons))


def has_accented_characters(path: str) -> bool:
    """Return True if the path contains an accented Latin letter."""
    return ACCENTED_CHARACTERS.search(path) is not None


def find_cloud_folders(path: str) -> list[str]:
    """Return every cloud-sync folder name found in the path, in CLOUD_FOLDERS order."""
    lowered = path.lower()
    return [name for name in CLOUD_FOLDERS if name.lower() in lowered]


def _starts_with(path: str, prefix: str) -> bool:
    return path.lower().startswith(prefix.lower())
