"""
Tests for the check session state machine.

PENDING -> SUCCEEDED on the first empty result, back to PENDING only via
force_reset(), and a single success transition under concurrent callers.
"""

from __future__ import annotations

import threading

from project_path_checker.schemas.violations import CloudFolder, OnDesktop, SpecialFolders
from project_path_checker.services.session import CheckSession, SessionStatus

GOOD_PATH = 'D:\\Dev\\Proj\\'
BAD_PATH = 'C:\\Users\\Alice\\Dropbox\\Proj\\'
NO_FOLDERS = SpecialFolders()


def test_new_session_is_pending() -> None:
    session = CheckSession()

    assert session.status is SessionStatus.PENDING
    assert session.should_run()
    assert session.violations == ()


def test_success_is_recorded_and_stops_further_runs() -> None:
    session = CheckSession()

    result = session.run_check(GOOD_PATH, NO_FOLDERS, 90)

    assert result.ok
    assert session.status is SessionStatus.SUCCEEDED
    assert not session.should_run()
    assert not session.should_run()


def test_violations_keep_session_pending() -> None:
    session = CheckSession()

    result = session.run_check(BAD_PATH, NO_FOLDERS, 90)

    assert result.reasons == (CloudFolder(name='Dropbox'),)
    assert session.status is SessionStatus.PENDING
    assert session.should_run()
    assert session.violations == (CloudFolder(name='Dropbox'),)


def test_later_success_clears_held_violations() -> None:
    session = CheckSession()
    session.run_check(BAD_PATH, NO_FOLDERS, 90)

    session.run_check(GOOD_PATH, NO_FOLDERS, 90)

    assert session.violations == ()
    assert session.status is SessionStatus.SUCCEEDED


def test_force_reset_returns_to_pending() -> None:
    session = CheckSession()
    session.run_check(GOOD_PATH, NO_FOLDERS, 90)

    session.force_reset()

    assert session.status is SessionStatus.PENDING
    assert session.should_run()


def test_force_reset_clears_violations_without_rerunning() -> None:
    session = CheckSession()
    session.run_check(BAD_PATH, NO_FOLDERS, 90)

    session.force_reset()

    assert session.violations == ()
    assert session.status is SessionStatus.PENDING


def test_clear_violations_keeps_status() -> None:
    session = CheckSession()
    folders = SpecialFolders(desktop='C:\\Users\\Alice\\Desktop')
    session.run_check('C:\\Users\\Alice\\Desktop\\Proj\\', folders, 90)
    assert session.violations == (OnDesktop(),)

    assert session.clear_violations() == 1
    assert session.violations == ()
    assert session.clear_violations() == 0
    assert session.status is SessionStatus.PENDING


def test_run_check_once_skips_after_success() -> None:
    session = CheckSession()

    first = session.run_check_once(GOOD_PATH, NO_FOLDERS, 90)
    second = session.run_check_once(BAD_PATH, NO_FOLDERS, 90)

    assert first is not None and first.ok
    assert second is None
    assert session.violations == ()


def test_run_check_once_runs_again_after_reset() -> None:
    session = CheckSession()
    session.run_check_once(GOOD_PATH, NO_FOLDERS, 90)
    session.force_reset()

    result = session.run_check_once(BAD_PATH, NO_FOLDERS, 90)

    assert result is not None
    assert result.reasons == (CloudFolder(name='Dropbox'),)


def test_sessions_are_independent() -> None:
    first = CheckSession()
    second = CheckSession()

    first.run_check(GOOD_PATH, NO_FOLDERS, 90)

    assert not first.should_run()
    assert second.should_run()


def test_only_one_concurrent_caller_observes_success() -> None:
    session = CheckSession()
    barrier = threading.Barrier(16)
    results = []
    results_lock = threading.Lock()

    def worker() -> None:
        barrier.wait()
        result = session.run_check_once(GOOD_PATH, NO_FOLDERS, 90)
        with results_lock:
            results.append(result)

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    successes = [result for result in results if result is not None]
    assert len(results) == 16
    assert len(successes) == 1
    assert successes[0].ok
