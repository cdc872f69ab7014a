"""Script-style usage: one battery, one exit status."""

from testtally.api import (
    assert_in_range_inclusive,
    did_last_test_pass,
    subtest_block_begin,
    subtest_block_end,
    subtest_name,
    test_activity_message,
    test_begin,
    test_exit_code,
    test_final_results,
    test_process_result,
    tests_init,
)


def parse_version(text: str) -> tuple[int, ...]:
    return tuple(int(part) for part in text.split("."))


tests_init(False)

test_begin("parse_version", "dotted version strings")
test_process_result(
    0 if parse_version("1.2.3") == (1, 2, 3) else 1,
    "1.2.3 parses to (1, 2, 3)",
    "1.2.3 parsed incorrectly",
)
assert_in_range_inclusive(1, 3, len(parse_version("4.5")), "two components", "unexpected component count")

test_begin("parse_version", "component bounds")
test_activity_message("checking every component of 10.0.255")
subtest_block_begin("components")
for index, value in enumerate(parse_version("10.0.255")):
    subtest_name(f"component {index}")
    assert_in_range_inclusive(0, 255, value, f"{value} fits in a byte", f"{value} does not fit in a byte")
subtest_block_end()

if not did_last_test_pass():
    test_activity_message("component bounds failed")

test_final_results()
raise SystemExit(test_exit_code())
