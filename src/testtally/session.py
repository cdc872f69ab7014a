"""Test-run bookkeeping.

A ``RunSession`` owns the counters of one test battery: the top-level tally,
the single optional sub-test group, the current test identity and the sticky
exit status. Every check funnels through ``process_result``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

from testtally.config import TallySettings
from testtally.counter import ResultCounter
from testtally.outcomes import (
    Failed,
    NestedGroupError,
    Outcome,
    Passed,
    ReportMode,
    UsageError,
    in_range_inclusive,
    to_outcome,
)
from testtally.reports.base import Reporter
from testtally.reports.console import ConsoleReporter
from testtally.scope import ScopeStack


logger = logging.getLogger(__name__)

NESTED_GROUP_MESSAGE = "You are trying to start a subtest block inside a subtest block"


class RunSession:
    """State of one test battery, from ``init`` to exit-code retrieval.

    Examples:
        session = RunSession(squelch=False)
        session.begin_test("math", "integer addition")
        session.process_result(0 if 1 + 1 == 2 else 1, "1 + 1 is 2", "1 + 1 is not 2")
        session.final_results()
        raise SystemExit(session.exit_code())
    """

    def __init__(
        self,
        squelch: bool | None = None,
        *,
        reporter: Reporter | None = None,
        settings: TallySettings | None = None,
    ) -> None:
        self.settings = settings or TallySettings()
        self.reporter = reporter or ConsoleReporter()
        self.totals = ResultCounter()
        self.scopes = ScopeStack()
        self.init(squelch)

    def init(self, squelch: bool | None = None) -> None:
        """Reset every counter and start a fresh battery.

        Args:
            squelch: Hide passing results and status messages. ``None`` uses
                the configured default.
        """
        self._squelch = self.settings.squelch if squelch is None else bool(squelch)
        self.totals.reset()
        self.scopes.reset()
        self.current_test_name = ""
        self.current_test_desc = ""
        self._exit_status = 0
        logger.debug("Initialized test session (squelch=%s)", self._squelch)

    @property
    def squelch(self) -> bool:
        return self._squelch

    @property
    def exit_status(self) -> int:
        """1 once any check has failed since ``init``, else 0."""
        return self._exit_status

    @property
    def total_success(self) -> int:
        return self.totals.success

    @property
    def total_count(self) -> int:
        return self.totals.total

    @property
    def in_group(self) -> bool:
        return self.scopes.active

    @property
    def group_success(self) -> int:
        return self.scopes.group_success

    @property
    def group_count(self) -> int:
        return self.scopes.group_count

    def begin_test(self, name: str, description: str = "") -> None:
        """Name the test that subsequent results belong to."""
        self.current_test_name = name
        self.current_test_desc = description
        logger.debug("Beginning test %s: %s", name, description)
        if not self._squelch:
            self.reporter.on_test_begin(name, description)

    def process_result(
        self,
        outcome: Outcome | bool | int,
        success_message: str = "",
        failure_message: str = "",
    ) -> bool:
        """Record one check in the active scope and report it.

        Failures always print and make the whole run fail, even inside a
        sub-test group. Returns whether the check passed.
        """
        result = to_outcome(outcome)
        group = self.scopes.group
        counter = group.counter if group else self.totals
        counter.record(result.passed)
        # last-result flag follows the most recent check in any scope
        self.totals.last_failed = not result.passed
        unit_name = group.unit_name if group else None

        if result.passed:
            if not self._squelch:
                self.reporter.on_result(
                    True,
                    success_message,
                    test_name=self.current_test_name,
                    test_desc=self.current_test_desc,
                    unit_name=unit_name,
                )
        else:
            self._exit_status = 1
            self.reporter.on_result(
                False,
                failure_message,
                test_name=self.current_test_name,
                test_desc=self.current_test_desc,
                unit_name=unit_name,
            )
        return result.passed

    def assert_exit_code_zero(
        self,
        outcome: Outcome | bool | int,
        success_message: str = "",
        failure_message: str = "",
    ) -> bool:
        return self.process_result(outcome, success_message, failure_message)

    def assert_in_range_inclusive(
        self,
        low: int | float,
        high: int | float,
        value: int | float,
        success_message: str = "",
        failure_message: str = "",
    ) -> bool:
        return self.process_result(in_range_inclusive(low, high, value), success_message, failure_message)

    def check(
        self,
        fn: Callable[..., Any],
        *args: Any,
        success_message: str = "",
        failure_message: str = "",
        **kwargs: Any,
    ) -> bool:
        """Run ``fn`` as a single check.

        A ``None`` return counts as passed; an ``Outcome``, bool or int return
        is interpreted with ``to_outcome``. Exceptions, including a return
        value that is not a valid outcome, are recorded as a failure carrying
        the exception text and do not stop the run.
        """
        try:
            returned = fn(*args, **kwargs)
            result = Passed() if returned is None else to_outcome(returned)
        except AssertionError as e:
            logger.debug("Check %r failed: %s", fn, e)
            return self.process_result(Failed(str(e)), success_message, failure_message or str(e))
        except Exception as e:
            logger.debug("Check %r raised %s", fn, type(e).__name__, exc_info=True)
            detail = f"{type(e).__name__}: {e}"
            return self.process_result(Failed(detail), success_message, failure_message or detail)

        if not result.passed and not failure_message:
            failure_message = result.detail
        return self.process_result(result, success_message, failure_message)

    def activity_message(self, text: str) -> None:
        if not self._squelch:
            self.reporter.on_activity(text)

    def block_label(self, text: str) -> None:
        if not self._squelch:
            self.reporter.on_block_label(text)

    def begin_group(self, label: str) -> None:
        """Open a sub-test group whose checks fold into one unit.

        Raises:
            NestedGroupError: If a group is already open. The process is
                expected to stop; no counters are modified.
        """
        try:
            self.scopes.begin(label)
        except NestedGroupError as e:
            context = f"{self.current_test_name}: {self.current_test_desc}: {label}"
            logger.error("%s (%s)", e.message, context)
            self.reporter.on_usage_error(NESTED_GROUP_MESSAGE, context)
            raise
        self.reporter.on_group_begin(label, self.current_test_name, self.current_test_desc)

    def set_unit_name(self, label: str) -> None:
        """Label the next check inside the open group."""
        if not self.scopes.set_unit_name(label):
            logger.warning("Ignoring sub-test name %r: no sub-test group is open", label)

    def end_group(self, report_mode: ReportMode | int | None = None) -> bool:
        """Close the open group and record it as one check in the enclosing scope.

        Args:
            report_mode: When to print the boxed group summary. ``None`` uses
                the configured default (only on failure).

        Returns:
            Whether every check in the group passed.

        Raises:
            UsageError: If no group is open.
        """
        mode = self.settings.report_mode if report_mode is None else ReportMode(report_mode)
        try:
            group = self.scopes.end()
        except UsageError as e:
            logger.error("%s (%s: %s)", e.message, self.current_test_name, self.current_test_desc)
            raise

        counter = group.counter
        passed = counter.all_passed
        self.process_result(0 if passed else 1)

        if mode == ReportMode.ALWAYS or (mode == ReportMode.ON_FAILURE and not passed):
            self.reporter.on_group_summary(group.name, counter.success, counter.total)
        counter.reset()
        return passed

    @contextmanager
    def group(self, label: str, report_mode: ReportMode | int | None = None) -> Iterator[RunSession]:
        """Run the ``with`` body as a sub-test group.

        An exception escaping the body is recorded as a failed check inside
        the group before the group is folded.
        """
        self.begin_group(label)
        try:
            yield self
        except Exception as e:
            logger.debug("Sub-test group %r raised %s", label, type(e).__name__, exc_info=True)
            self.process_result(Failed(str(e)), failure_message=f"{type(e).__name__}: {e}")
        self.end_group(report_mode)

    def final_results(self) -> None:
        """Print the end-of-run summary. Always printed, even when squelched."""
        self.reporter.on_final_results(self.totals.success, self.totals.total)

    def exit_code(self) -> int:
        """0 if every top-level unit passed, else 1."""
        return 0 if self.totals.all_passed else 1

    def did_all_tests_pass(self) -> bool:
        return self._exit_status == 0

    def did_last_test_pass(self) -> bool:
        return not self.totals.last_failed
