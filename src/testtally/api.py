"""Script-style functions operating on the active session.

These mirror a test script's flow: ``tests_init`` once, ``test_begin`` per
block, one ``test_process_result`` per check, then ``test_final_results`` and
``raise SystemExit(test_exit_code())``. Every function except ``tests_init``
and ``in_range_inclusive`` raises ``UsageError`` when no session is active.
"""

from __future__ import annotations

from testtally.context import current_session, get_session, set_session
from testtally.outcomes import Outcome, ReportMode, in_range_inclusive
from testtally.reports.base import Reporter
from testtally.session import RunSession


__all__ = [
    "assert_exit_code_zero",
    "assert_in_range_inclusive",
    "did_all_tests_pass",
    "did_last_test_pass",
    "in_range_inclusive",
    "subtest_block_begin",
    "subtest_block_end",
    "subtest_name",
    "test_activity_message",
    "test_begin",
    "test_block_label",
    "test_exit_code",
    "test_final_results",
    "test_process_result",
    "tests_init",
]


def tests_init(squelch: bool | None = None, *, reporter: Reporter | None = None) -> RunSession:
    """Start a fresh battery, reusing the active session when there is one."""
    session = current_session()
    if session is None or reporter is not None:
        session = RunSession(squelch, reporter=reporter)
        set_session(session)
    else:
        session.init(squelch)
    return session


tests_init.__test__ = False


def test_begin(name: str, description: str = "") -> None:
    get_session().begin_test(name, description)


test_begin.__test__ = False


def test_process_result(
    outcome: Outcome | bool | int, success_message: str = "", failure_message: str = ""
) -> bool:
    return get_session().process_result(outcome, success_message, failure_message)


test_process_result.__test__ = False


def assert_exit_code_zero(
    outcome: Outcome | bool | int, success_message: str = "", failure_message: str = ""
) -> bool:
    return get_session().assert_exit_code_zero(outcome, success_message, failure_message)


def assert_in_range_inclusive(
    low: int | float,
    high: int | float,
    value: int | float,
    success_message: str = "",
    failure_message: str = "",
) -> bool:
    return get_session().assert_in_range_inclusive(low, high, value, success_message, failure_message)


def test_activity_message(text: str) -> None:
    get_session().activity_message(text)


test_activity_message.__test__ = False


def test_block_label(text: str) -> None:
    get_session().block_label(text)


test_block_label.__test__ = False


def subtest_block_begin(label: str) -> None:
    get_session().begin_group(label)


def subtest_name(label: str) -> None:
    get_session().set_unit_name(label)


def subtest_block_end(report_mode: ReportMode | int | None = None) -> bool:
    return get_session().end_group(report_mode)


def test_final_results() -> None:
    get_session().final_results()


test_final_results.__test__ = False


def test_exit_code() -> int:
    return get_session().exit_code()


test_exit_code.__test__ = False


def did_all_tests_pass() -> bool:
    return get_session().did_all_tests_pass()


def did_last_test_pass() -> bool:
    return get_session().did_last_test_pass()

