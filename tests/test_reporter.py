"""
Tests for the check reporter (host-side glue around CheckSession).

Async methods are driven with asyncio.run from plain tests.
"""

from __future__ import annotations

import asyncio

import pytest

from project_path_checker.protocols import NullLogger
from project_path_checker.schemas.violations import CloudFolder, PathTooLong, SpecialFolders
from project_path_checker.services.messages import ViolationFormatter, get_message_lookup
from project_path_checker.services.reporter import PathCheckReporter
from project_path_checker.services.session import CheckSession, SessionStatus

GOOD_PATH = 'D:\\Dev\\Proj\\'
NO_FOLDERS = SpecialFolders()


class RecordingLogger:
    """LoggerProtocol implementation that keeps every message."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    async def info(self, message: str) -> None:
        self.messages.append(('info', message))

    async def warning(self, message: str) -> None:
        self.messages.append(('warning', message))

    async def error(self, message: str) -> None:
        self.messages.append(('error', message))


class BrokenLogger(RecordingLogger):
    """Logger whose output channel is gone."""

    async def info(self, message: str) -> None:
        raise ConnectionError('display unavailable')


def make_reporter(session: CheckSession, logger: RecordingLogger, **kwargs: object) -> PathCheckReporter:
    formatter = ViolationFormatter(get_message_lookup('en'))
    return PathCheckReporter(session, formatter, logger, **kwargs)  # type: ignore[arg-type]


def test_success_reported_once() -> None:
    session = CheckSession()
    logger = RecordingLogger()
    reporter = make_reporter(session, logger, about='about line')

    first = asyncio.run(reporter.report(GOOD_PATH, NO_FOLDERS, 90))
    second = asyncio.run(reporter.report(GOOD_PATH, NO_FOLDERS, 90))

    assert first.status == 'passed'
    assert first.violations == ()
    assert second.status == 'skipped'
    congratulations = [message for _, message in logger.messages if message.startswith('Congratulations')]
    assert len(congratulations) == 1
    assert ('info', 'about line') in logger.messages


def test_violations_logged_as_warnings() -> None:
    session = CheckSession()
    logger = RecordingLogger()
    reporter = make_reporter(session, logger)
    path = 'C:\\Users\\Alice\\Dropbox\\' + 'x' * 80

    report = asyncio.run(reporter.report(path, NO_FOLDERS, 90))

    assert report.status == 'failed'
    assert report.violations == (PathTooLong(length=len(path), max_length=90), CloudFolder(name='Dropbox'))
    assert len(report.messages) == 2
    assert logger.messages == [('warning', message) for message in report.messages]
    assert report.title == 'INVALID PROJECT LOCATION (path too long, in a Dropbox folder.)'
    assert session.status is SessionStatus.PENDING


def test_failed_check_runs_again() -> None:
    session = CheckSession()
    reporter = make_reporter(session, RecordingLogger())

    asyncio.run(reporter.report('/srv/OneDrive/game/', NO_FOLDERS, 90))
    report = asyncio.run(reporter.report('/srv/OneDrive/game/', NO_FOLDERS, 90))

    assert report.status == 'failed'


def test_force_reset_allows_new_success_message() -> None:
    session = CheckSession()
    logger = RecordingLogger()
    reporter = make_reporter(session, logger)

    asyncio.run(reporter.report(GOOD_PATH, NO_FOLDERS, 90))
    session.force_reset()
    report = asyncio.run(reporter.report(GOOD_PATH, NO_FOLDERS, 90))

    assert report.status == 'passed'
    assert len([m for _, m in logger.messages if m.startswith('Congratulations')]) == 2


def test_positive_messages_can_be_disabled() -> None:
    session = CheckSession()
    logger = RecordingLogger()
    reporter = make_reporter(session, logger, show_positive_messages=False)

    report = asyncio.run(reporter.report(GOOD_PATH, NO_FOLDERS, 90))

    assert report.status == 'passed'
    assert logger.messages == []
    assert session.status is SessionStatus.SUCCEEDED


def test_success_recorded_even_if_output_fails() -> None:
    session = CheckSession()
    reporter = make_reporter(session, BrokenLogger())

    with pytest.raises(ConnectionError):
        asyncio.run(reporter.report(GOOD_PATH, NO_FOLDERS, 90))

    assert session.status is SessionStatus.SUCCEEDED
    assert not session.should_run()


def test_null_logger() -> None:
    reporter = PathCheckReporter(CheckSession(), ViolationFormatter(get_message_lookup('fr')), NullLogger())

    report = asyncio.run(reporter.report('/srv/Élève/', NO_FOLDERS, 90))

    assert report.status == 'failed'
    assert report.messages[0].startswith('Le projet est')
