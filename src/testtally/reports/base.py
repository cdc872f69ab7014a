"""Reporter interface for harness output."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Reporter(ABC):
    """Receives harness events and renders them.

    Reporters only read what they are given; verbosity decisions are made by
    the session before a hook is called.
    """

    @abstractmethod
    def on_test_begin(self, name: str, description: str) -> None:
        """Called when a new test block starts."""

    @abstractmethod
    def on_result(
        self,
        passed: bool,
        message: str,
        *,
        test_name: str,
        test_desc: str,
        unit_name: str | None = None,
    ) -> None:
        """Called for each processed check that should be shown."""

    @abstractmethod
    def on_group_begin(self, label: str, test_name: str, test_desc: str) -> None:
        """Called when a sub-test group opens."""

    @abstractmethod
    def on_group_summary(self, label: str, success: int, total: int) -> None:
        """Called after a sub-test group folds, when its report mode asks for it."""

    @abstractmethod
    def on_activity(self, message: str) -> None:
        """Called for free-form status messages."""

    @abstractmethod
    def on_block_label(self, message: str) -> None:
        """Called to label a block of tests."""

    @abstractmethod
    def on_final_results(self, success: int, total: int) -> None:
        """Called for the end-of-run summary."""

    @abstractmethod
    def on_usage_error(self, message: str, context: str) -> None:
        """Called right before the harness aborts on a usage error."""
