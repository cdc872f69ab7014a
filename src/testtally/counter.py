"""Success/total bookkeeping shared by top-level tests and sub-test groups."""

from dataclasses import dataclass


@dataclass
class ResultCounter:
    """Running tally of checks.

    ``success <= total`` holds after every ``record`` call.
    """

    success: int = 0
    total: int = 0
    last_failed: bool = False

    def record(self, passed: bool) -> None:
        if passed:
            self.success += 1
        self.total += 1
        self.last_failed = not passed

    def reset(self) -> None:
        self.success = 0
        self.total = 0
        self.last_failed = False

    @property
    def failed(self) -> int:
        return self.total - self.success

    @property
    def all_passed(self) -> bool:
        """True when every recorded check passed (vacuously true when empty)."""
        return self.success == self.total
