"""Tests for testtally.session.RunSession outside sub-test groups."""

import pytest

from testtally.config import TallySettings
from testtally.outcomes import Failed, Passed
from testtally.session import RunSession


@pytest.fixture
def session(output) -> RunSession:
    return RunSession(False, reporter=output.reporter)


class TestInit:
    def test_fresh_session_is_passing(self, session):
        assert session.total_success == 0
        assert session.total_count == 0
        assert session.exit_code() == 0
        assert session.did_all_tests_pass() is True
        assert session.did_last_test_pass() is True

    def test_reinit_resets_counters_and_exit_status(self, session):
        session.process_result(1)
        session.process_result(0)
        session.init(True)

        assert (session.total_success, session.total_count) == (0, 0)
        assert session.exit_status == 0
        assert session.did_all_tests_pass() is True
        assert session.squelch is True

    def test_squelch_defaults_to_settings(self, output):
        session = RunSession(reporter=output.reporter, settings=TallySettings(squelch=True))
        assert session.squelch is True

    def test_explicit_squelch_wins_over_settings(self, output):
        session = RunSession(False, reporter=output.reporter, settings=TallySettings(squelch=True))
        assert session.squelch is False


class TestProcessResult:
    def test_counts_every_call(self, session):
        outcomes = [0, 1, 0, 0, 3, 0]
        for outcome in outcomes:
            session.process_result(outcome)
            assert session.total_success <= session.total_count

        assert session.total_count == len(outcomes)
        assert session.total_success == outcomes.count(0)

    def test_four_pass_one_fail(self, session):
        for outcome in (0, 0, 1, 0, 0):
            session.process_result(outcome)

        assert session.total_success == 4
        assert session.total_count == 5
        assert session.exit_code() == 1

    def test_failure_is_sticky(self, session):
        session.process_result(1)
        for _ in range(3):
            session.process_result(0)

        assert session.exit_status == 1
        assert session.did_all_tests_pass() is False

    def test_returns_whether_check_passed(self, session):
        assert session.process_result(0) is True
        assert session.process_result(2) is False

    def test_accepts_tagged_outcomes(self, session):
        session.process_result(Passed())
        session.process_result(Failed("nope"))

        assert (session.total_success, session.total_count) == (1, 2)

    def test_accepts_booleans(self, session):
        session.process_result(True)
        session.process_result(False)

        assert (session.total_success, session.total_count) == (1, 2)


class TestLastResult:
    def test_fail_then_pass(self, session):
        session.process_result(1)
        session.process_result(0)
        assert session.did_last_test_pass() is True

    def test_pass_then_fail(self, session):
        session.process_result(0)
        session.process_result(1)
        assert session.did_last_test_pass() is False


class TestOutput:
    def test_header_and_pass_line(self, session, output):
        session.begin_test("math", "adds")
        session.process_result(0, "2 + 2 is 4", "2 + 2 is not 4")

        assert output.lines == [
            " * * * * math: adds * * * *",
            "",
            "             math :: adds ",
            "                  PASSED   2 + 2 is 4",
            "",
        ]

    def test_failure_line(self, session, output):
        session.begin_test("math", "adds")
        output.clear()
        session.process_result(1, "2 + 2 is 4", "2 + 2 is not 4")

        assert output.lines == [
            "    --   --> math :: adds",
            "                  FAILED   2 + 2 is not 4",
            "",
        ]

    def test_squelch_hides_passes_and_headers(self, output):
        session = RunSession(True, reporter=output.reporter)
        session.begin_test("math", "adds")
        session.activity_message("warming up")
        session.block_label("block")
        session.process_result(0, "ok", "bad")

        assert output.text == ""

    def test_squelch_never_hides_failures_or_final_report(self, output):
        session = RunSession(True, reporter=output.reporter)
        session.begin_test("math", "adds")
        session.process_result(1, "ok", "bad")
        session.final_results()

        assert "                  FAILED   bad" in output.lines
        assert "|           0 tests passed out of 1           |" in output.lines

    def test_activity_and_block_label(self, session, output):
        session.activity_message("loading")
        session.block_label("io")

        assert output.lines == [
            "    >>> loading",
            "",
            "    |--------|",
            "    | # io # |",
            "    |--------|",
            "",
        ]


class TestFinalResults:
    def test_does_not_alter_state(self, session):
        session.process_result(1)
        session.final_results()

        assert session.exit_status == 1
        assert session.total_count == 1

    def test_empty_run_is_vacuously_passed(self, session, output):
        session.final_results()

        assert "|          ### RESULT ###      PASSED         |" in output.lines
        assert session.exit_code() == 0


class TestHelpers:
    def test_assert_in_range_inclusive(self, session):
        session.assert_in_range_inclusive(1, 10, 1)
        session.assert_in_range_inclusive(1, 10, 10)
        session.assert_in_range_inclusive(1, 10, 11)

        assert (session.total_success, session.total_count) == (2, 3)

    def test_assert_exit_code_zero(self, session):
        session.assert_exit_code_zero(0)
        assert session.total_success == 1


class TestCheck:
    def test_none_return_passes(self, session):
        assert session.check(lambda: None) is True
        assert session.total_success == 1

    def test_returned_outcome_is_used(self, session, output):
        assert session.check(lambda: Failed("wrong answer")) is False
        assert "                  FAILED   wrong answer" in output.lines

    def test_returned_exit_code_is_used(self, session):
        assert session.check(lambda code: code, 3) is False

    def test_assertion_error_is_failure(self, session, output):
        def body():
            assert 1 == 2, "one is not two"

        assert session.check(body) is False
        assert session.total_count == 1
        assert any("one is not two" in line for line in output.lines)

    def test_exception_is_recorded_not_raised(self, session, output):
        def body():
            raise KeyError("missing")

        assert session.check(body, failure_message="lookup failed") is False
        assert session.exit_status == 1
        assert "                  FAILED   lookup failed" in output.lines

    def test_kwargs_forwarded(self, session):
        seen = {}

        def body(value, *, scale):
            seen["product"] = value * scale

        session.check(body, 2, scale=3)
        assert seen == {"product": 6}

    def test_float_return_is_recorded_as_failure(self, session, output):
        assert session.check(lambda: 0.5) is False
        assert session.total_count == 1
        assert session.exit_status == 1
        assert any("TypeError: Cannot interpret float" in line for line in output.lines)

    def test_str_return_is_recorded_as_failure(self, session):
        assert session.check(lambda: "ok", failure_message="bad return value") is False
        assert (session.total_success, session.total_count) == (0, 1)

    def test_run_continues_after_invalid_return(self, session):
        session.check(lambda: "ok")
        session.check(lambda: None)
        assert (session.total_success, session.total_count) == (1, 2)
