"""
Check session - remembers whether the project location was already validated.

State machine:
    PENDING --(empty CheckResult)--> SUCCEEDED
    SUCCEEDED --(force_reset)--> PENDING

A session lives as long as its host process (one CLI run, one MCP server).
Nothing is persisted. Hosts create the session at startup and pass it to
whatever needs it; there is no module-level instance.
"""

from __future__ import annotations

import enum
import threading

from project_path_checker.schemas.violations import CheckResult, SpecialFolders, ViolationReason
from project_path_checker.services.rules import DEFAULT_MAX_PATH_LENGTH, evaluate

__all__ = ['CheckSession', 'SessionStatus']


class SessionStatus(enum.Enum):
    PENDING = 'pending'
    SUCCEEDED = 'succeeded'


class CheckSession:
    """
    Owns the "success already reported" flag and the last violations.

    All reads and writes of the state go through one lock so that
    overlapping host callbacks cannot both observe PENDING and both
    report a success.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._status = SessionStatus.PENDING
        self._violations: tuple[ViolationReason, ...] = ()

    @property
    def status(self) -> SessionStatus:
        with self._lock:
            return self._status

    @property
    def violations(self) -> tuple[ViolationReason, ...]:
        """Violations from the last check (empty after success or a reset)."""
        with self._lock:
            return self._violations

    def should_run(self) -> bool:
        """Return False once a successful check has been recorded."""
        with self._lock:
            return self._status is SessionStatus.PENDING

    def run_check(
        self,
        path: str,
        special_folders: SpecialFolders,
        max_length: int = DEFAULT_MAX_PATH_LENGTH,
    ) -> CheckResult:
        """
        Evaluate the path and record the outcome.

        An empty result moves the session to SUCCEEDED. The result is
        returned either way.
        """
        with self._lock:
            return self._run_locked(path, special_folders, max_length)

    def run_check_once(
        self,
        path: str,
        special_folders: SpecialFolders,
        max_length: int = DEFAULT_MAX_PATH_LENGTH,
    ) -> CheckResult | None:
        """
        Atomic should_run() + run_check().

        Returns None without evaluating when success was already recorded.
        Only one caller can ever receive the empty result that causes the
        PENDING -> SUCCEEDED transition.
        """
        with self._lock:
            if self._status is SessionStatus.SUCCEEDED:
                return None
            return self._run_locked(path, special_folders, max_length)

    def force_reset(self) -> None:
        """Forget a recorded success and the held violations. Does not re-run the check."""
        with self._lock:
            self._status = SessionStatus.PENDING
            self._violations = ()

    def clear_violations(self) -> int:
        """
        Drop the held violations, keeping the success flag.

        Returns:
            Number of violations cleared
        """
        with self._lock:
            count = len(self._violations)
            self._violations = ()
            return count

    def _run_locked(self, path: str, special_folders: SpecialFolders, max_length: int) -> CheckResult:
        result = evaluate(path, special_folders, max_length)
        self._violations = result.reasons
        if result.ok:
            self._status = SessionStatus.SUCCEEDED
        return result
