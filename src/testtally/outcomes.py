"""Check outcomes and harness usage errors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Passed:
    """A check that succeeded."""

    detail: str = ""

    @property
    def passed(self) -> bool:
        return True

    @property
    def exit_code(self) -> int:
        return 0


@dataclass(frozen=True, slots=True)
class Failed:
    """A check that failed, with an optional explanation."""

    detail: str = ""

    @property
    def passed(self) -> bool:
        return False

    @property
    def exit_code(self) -> int:
        return 1


Outcome: TypeAlias = Passed | Failed


def to_outcome(value: Outcome | bool | int) -> Outcome:
    """Normalize a check result into an ``Outcome``.

    Integers follow the process exit-code convention: zero is the only
    success value. Booleans are truth values (``True`` means passed).
    """
    if isinstance(value, (Passed, Failed)):
        return value
    if isinstance(value, bool):
        return Passed() if value else Failed()
    if isinstance(value, int):
        return Passed() if value == 0 else Failed(f"exit code {value}")
    raise TypeError(f"Cannot interpret {type(value).__name__} as a check outcome")


def in_range_inclusive(low: int | float, high: int | float, value: int | float) -> int:
    """Return 0 when ``low <= value <= high``, else 1."""
    return 0 if low <= value <= high else 1


class ReportMode(IntEnum):
    """When to print the boxed summary of a finished sub-test group."""

    NEVER = 0
    ALWAYS = 1
    ON_FAILURE = 2


class UsageError(SystemExit):
    """The harness was driven in an undefined order.

    Subclasses ``SystemExit`` so an uncaught usage error stops the process
    with status 1 instead of letting counters drift.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(1)

    def __str__(self) -> str:
        return self.message


class NestedGroupError(UsageError):
    """A sub-test group was started while another one was still open."""
