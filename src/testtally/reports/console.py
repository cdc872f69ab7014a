"""Console reporter for testtally output using Rich."""

from __future__ import annotations

from rich.console import Console

from testtally.reports import format as fmt
from testtally.reports.base import Reporter


def make_console(**kwargs) -> Console:
    """Console that writes every line verbatim (no markup, highlighting or wrapping)."""
    kwargs.setdefault("markup", False)
    kwargs.setdefault("highlight", False)
    kwargs.setdefault("emoji", False)
    kwargs.setdefault("soft_wrap", True)
    return Console(**kwargs)


class ConsoleReporter(Reporter):
    """Reporter that writes the legacy line-oriented format to the console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or make_console()

    def _print_lines(self, lines: list[str]) -> None:
        for line in lines:
            self.console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def on_test_begin(self, name: str, description: str) -> None:
        self._print_lines(fmt.header_lines(name, description))

    def on_result(
        self,
        passed: bool,
        message: str,
        *,
        test_name: str,
        test_desc: str,
        unit_name: str | None = None,
    ) -> None:
        self._print_lines(
            fmt.result_lines(
                passed, message, test_name=test_name, test_desc=test_desc, unit_name=unit_name
            )
        )

    def on_group_begin(self, label: str, test_name: str, test_desc: str) -> None:
        self._print_lines(fmt.group_banner(label, test_name, test_desc))

    def on_group_summary(self, label: str, success: int, total: int) -> None:
        self._print_lines(fmt.group_summary(label, success, total))

    def on_activity(self, message: str) -> None:
        self._print_lines(fmt.activity_lines(message))

    def on_block_label(self, message: str) -> None:
        self._print_lines(fmt.block_label_lines(message))

    def on_final_results(self, success: int, total: int) -> None:
        self._print_lines(fmt.final_results(success, total))

    def on_usage_error(self, message: str, context: str) -> None:
        self._print_lines(fmt.usage_error_lines(message, context))
