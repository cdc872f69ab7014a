"""Testtally - lightweight unit-test harness that tallies check outcomes."""

from .config import TallySettings
from .context import get_session, session_scope
from .counter import ResultCounter
from .outcomes import (
    Failed,
    NestedGroupError,
    Outcome,
    Passed,
    ReportMode,
    UsageError,
    in_range_inclusive,
    to_outcome,
)
from .reports import ConsoleReporter, Reporter
from .session import RunSession
from .version import __version__


__all__ = [
    # Session
    "RunSession",
    "ResultCounter",
    "get_session",
    "session_scope",
    # Outcomes
    "Outcome",
    "Passed",
    "Failed",
    "ReportMode",
    "to_outcome",
    "in_range_inclusive",
    # Errors
    "UsageError",
    "NestedGroupError",
    # Output
    "Reporter",
    "ConsoleReporter",
    # Config
    "TallySettings",
]
