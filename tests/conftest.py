import io

import pytest

from testtally.context import set_session
from testtally.reports.console import ConsoleReporter, make_console


class CapturedOutput:
    """Console reporter writing into an in-memory buffer."""

    def __init__(self) -> None:
        self.buffer = io.StringIO()
        self.reporter = ConsoleReporter(make_console(file=self.buffer, width=200))

    @property
    def text(self) -> str:
        return self.buffer.getvalue()

    @property
    def lines(self) -> list[str]:
        return self.text.splitlines()

    def clear(self) -> None:
        self.buffer.seek(0)
        self.buffer.truncate()


@pytest.fixture
def output() -> CapturedOutput:
    return CapturedOutput()


@pytest.fixture(autouse=True)
def clean_session():
    """Avoid cross-test leakage of the process-wide session."""
    set_session(None)
    yield
    set_session(None)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("TESTTALLY_SQUELCH", "TESTTALLY_REPORT_MODE", "TESTTALLY_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
