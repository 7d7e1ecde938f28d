"""Schemas for project location checks."""

from project_path_checker.schemas.report import CheckReport, CheckStatus
from project_path_checker.schemas.violations import (
    AccentedCharacters,
    CheckResult,
    CloudFolder,
    DocumentsFolder,
    OnDesktop,
    PathTooLong,
    SpecialFolders,
    ViolationKind,
    ViolationReason,
)

__all__ = [
    'AccentedCharacters',
    'CheckReport',
    'CheckResult',
    'CheckStatus',
    'CloudFolder',
    'DocumentsFolder',
    'OnDesktop',
    'PathTooLong',
    'SpecialFolders',
    'ViolationKind',
    'ViolationReason',
]
