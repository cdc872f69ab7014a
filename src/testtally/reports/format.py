"""Pure line builders for the harness's text output.

Every function returns the lines to print, without trailing newlines. Lines
that are longer than their box overflow instead of being truncated.
"""

from __future__ import annotations


SPACE_FILL = "__"
"""Fill value that renders as spaces rather than a visible character."""

FINAL_BORDER = "|" + "-" * 45 + "|"
FINAL_PASSED = "|          ### RESULT ###      PASSED         |"
FINAL_FAILED = "|          ### RESULT ###   >> FAILED <<      |"
FINAL_COLUMN = 12

GROUP_INDENT = 8
GROUP_WIDTH = 65

TOP_LEVEL_PAD = " " * 4
GROUP_PAD = " " * 10


def repeat_char(fill: str, length: int) -> str:
    """Repeat the first character of ``fill`` ``length`` times.

    ``SPACE_FILL`` produces spaces. Non-positive lengths produce ``""``.
    """
    if length <= 0 or not fill:
        return ""
    char = " " if fill == SPACE_FILL else fill[0]
    return char * length


def box_line(indent: int, start: int, width: int, fill: str, message: str) -> str:
    """One line of a bordered box with ``message`` starting near column ``start``.

    The ``|`` caps add two characters to ``width``.
    """
    left = repeat_char(fill, start - 3)
    right = repeat_char(fill, width - start - len(message) - 1)
    return f"{repeat_char(SPACE_FILL, indent)}|{left} {message} {right}|"


def header_lines(name: str, description: str) -> list[str]:
    return [f" * * * * {name}: {description} * * * *", ""]


def result_lines(
    passed: bool,
    message: str,
    *,
    test_name: str,
    test_desc: str,
    unit_name: str | None = None,
) -> list[str]:
    """Pass/fail block for one check.

    ``unit_name`` is ``None`` at the top level and the sub-test label (possibly
    empty) inside a group.
    """
    in_group = unit_name is not None
    pad = GROUP_PAD if in_group else TOP_LEVEL_PAD
    if in_group:
        identity = f"{pad}--   --> {test_name} :: (subtest) {unit_name}"
    elif passed:
        identity = f"{pad}         {test_name} :: {test_desc} "
    else:
        identity = f"{pad}--   --> {test_name} :: {test_desc}"
    verdict = "PASSED" if passed else "FAILED"
    return [identity, f"{pad}              {verdict}   {message}", ""]


def activity_lines(message: str) -> list[str]:
    return [f"    >>> {message}", ""]


def block_label_lines(message: str) -> list[str]:
    border = "    |" + "-" * (len(message) + 6) + "|"
    return [border, f"    | # {message} # |", border, ""]


def group_banner(label: str, test_name: str, test_desc: str) -> list[str]:
    return [
        f"     * * * * Beginning a subtest block {label}: multiple assertions counting as one test * * * *",
        f"               inside {test_name} :: {test_desc} ",
        "",
    ]


def group_summary(label: str, success: int, total: int) -> list[str]:
    """Boxed summary of a finished sub-test group."""
    if success == total:
        headline = "### RESULT ###      PASSED"
    else:
        headline = "### RESULT ###   >> FAILED <<"
    return [
        "",
        box_line(GROUP_INDENT, 15, GROUP_WIDTH, "-", f"SUBTEST: {label}"),
        box_line(GROUP_INDENT, 15, GROUP_WIDTH, SPACE_FILL, headline),
        box_line(GROUP_INDENT, 10, GROUP_WIDTH, SPACE_FILL, f"{success} tests passed out of {total}"),
        box_line(GROUP_INDENT, 19, GROUP_WIDTH, SPACE_FILL, f"END: {label}"),
        "",
    ]


def final_results(success: int, total: int) -> list[str]:
    """Bordered end-of-run summary; the headline depends only on the counters."""
    left = " " * max(FINAL_COLUMN - len(str(success)), 0)
    right = " " * max(FINAL_COLUMN - len(str(total)), 0)
    return [
        "",
        FINAL_BORDER,
        FINAL_PASSED if success == total else FINAL_FAILED,
        f"|{left}{success} tests passed out of {total}{right}|",
        FINAL_BORDER,
        "",
    ]


def usage_error_lines(message: str, context: str) -> list[str]:
    return [message, f"FOR {context}"]
