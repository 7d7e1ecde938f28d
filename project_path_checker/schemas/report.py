"""
Report schemas.

Host-facing view of one check pass, returned by the MCP tools and printed by
`project-path-checker check --json`.
"""

from __future__ import annotations

from typing import Literal

from project_path_checker.schemas.base import StrictModel
from project_path_checker.schemas.violations import ViolationReason

CheckStatus = Literal['passed', 'failed', 'skipped']


class CheckReport(StrictModel):
    """
    Result of a reported check, with localized messages.

    status:
    - passed: no violations, success recorded for this session
    - failed: at least one violation, see `violations` and `messages`
    - skipped: success was already recorded, the check did not run
    """

    status: CheckStatus
    path: str
    max_length: int
    violations: tuple[ViolationReason, ...] = ()
    messages: tuple[str, ...] = ()  # One explanation per violation, same order
    title: str | None = None  # Failures only, e.g. 'INVALID PROJECT LOCATION (path too long)'
