"""Object-style usage with an explicit session, callables and a group context."""

from testtally import Failed, ReportMode, RunSession


def divide(a: float, b: float) -> float:
    return a / b


session = RunSession(squelch=False)
session.block_label("arithmetic")

session.begin_test("divide", "plain division")
session.check(lambda: divide(6, 3) == 2, success_message="6 / 3 == 2", failure_message="6 / 3 != 2")
session.check(divide, 1, 0, failure_message="dividing by zero raises")

session.begin_test("divide", "result ranges")
with session.group("fractions", report_mode=ReportMode.ALWAYS):
    for numerator in (1, 2, 3):
        session.set_unit_name(f"{numerator} / 4")
        value = divide(numerator, 4)
        session.process_result(0 < value < 1 or Failed(f"{value} is not a fraction"), f"{value} is a fraction")

session.final_results()
raise SystemExit(session.exit_code())
