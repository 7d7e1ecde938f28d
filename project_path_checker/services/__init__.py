"""Service layer for project location checks."""

from project_path_checker.services.messages import ViolationFormatter, detect_language, get_message_lookup
from project_path_checker.services.reporter import PathCheckReporter
from project_path_checker.services.rules import CLOUD_FOLDERS, DEFAULT_MAX_PATH_LENGTH, evaluate
from project_path_checker.services.session import CheckSession, SessionStatus
from project_path_checker.services.simulation import SimulationOptions, build_candidate_path, get_current_project_path

__all__ = [
    'CLOUD_FOLDERS',
    'DEFAULT_MAX_PATH_LENGTH',
    'CheckSession',
    'PathCheckReporter',
    'SessionStatus',
    'SimulationOptions',
    'ViolationFormatter',
    'build_candidate_path',
    'detect_language',
    'evaluate',
    'get_current_project_path',
    'get_message_lookup',
]
