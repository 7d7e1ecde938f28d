"""
Check reporter - drives a CheckSession on behalf of a host and reports the outcome.

Flow per request:
1. Atomically skip (already succeeded) or run the check via the session
2. Log one warning per violation, or the one-time congratulations
3. Return a CheckReport the host can render or serialize

The session records success before anything is logged, so a broken output
channel never prevents the success state from being kept.
"""

from __future__ import annotations

from project_path_checker.protocols import LoggerProtocol
from project_path_checker.schemas.report import CheckReport
from project_path_checker.schemas.violations import SpecialFolders
from project_path_checker.services.messages import ViolationFormatter
from project_path_checker.services.rules import DEFAULT_MAX_PATH_LENGTH
from project_path_checker.services.session import CheckSession

__all__ = ['PathCheckReporter']


class PathCheckReporter:
    """Reports project location checks through a LoggerProtocol."""

    def __init__(
        self,
        session: CheckSession,
        formatter: ViolationFormatter,
        logger: LoggerProtocol,
        show_positive_messages: bool = True,
        about: str | None = None,
    ) -> None:
        """
        Initialize the reporter.

        Args:
            session: Session holding the success flag for this host
            formatter: Localized message formatter
            logger: Output channel for warnings and the success message
            show_positive_messages: If False, success is recorded silently
            about: Optional line appended after the congratulations
        """
        self.session = session
        self.formatter = formatter
        self.logger = logger
        self.show_positive_messages = show_positive_messages
        self.about = about

    async def report(
        self,
        path: str,
        special_folders: SpecialFolders,
        max_length: int = DEFAULT_MAX_PATH_LENGTH,
    ) -> CheckReport:
        """
        Check the path (unless already validated this session) and log the outcome.

        Args:
            path: Candidate project path
            special_folders: OS Desktop/Documents paths
            max_length: Maximum allowed path length

        Returns:
            CheckReport with status passed, failed, or skipped
        """
        result = self.session.run_check_once(path, special_folders, max_length)

        if result is None:
            await self.logger.info('Project location already validated this session, skipping check')
            return CheckReport(status='skipped', path=path, max_length=max_length)

        if result.ok:
            if self.show_positive_messages:
                await self.logger.info(self.formatter.congratulations())
                if self.about:
                    await self.logger.info(self.about)
            return CheckReport(status='passed', path=path, max_length=max_length)

        messages = tuple(self.formatter.explain(reason) for reason in result.reasons)
        for message in messages:
            await self.logger.warning(message)

        return CheckReport(
            status='failed',
            path=path,
            max_length=max_length,
            violations=result.reasons,
            messages=messages,
            title=self.formatter.title(result.reasons),
        )
