"""Checks that a project is stored in a folder suited to development tooling."""

from project_path_checker.schemas.violations import CheckResult, SpecialFolders, ViolationReason
from project_path_checker.services.rules import evaluate
from project_path_checker.services.session import CheckSession, SessionStatus

__all__ = ['CheckResult', 'CheckSession', 'SessionStatus', 'SpecialFolders', 'ViolationReason', 'evaluate']
