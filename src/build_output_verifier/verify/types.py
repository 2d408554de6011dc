"""Verification check types."""

from dataclasses import dataclass
from enum import Enum


class CheckStatus(Enum):
    """Status of a verification check."""

    PASS = "pass"
    FAIL = "fail"
    WARN = "warn"


@dataclass(frozen=True)
class CheckResult:
    """Result of a single verification check."""

    name: str
    status: CheckStatus
    message: str = ""
    remediation: str | None = None

    @property
    def passed(self) -> bool:
        return self.status == CheckStatus.PASS


@dataclass(frozen=True)
class RunTally:
    """Running (total, passed) counters for one verification run.

    Every recorded result adds one to ``total``; only passing results add to
    ``passed``. Warnings therefore count as failed checks.
    """

    total: int = 0
    passed: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.passed <= self.total:
            raise ValueError(f"Invalid tally: {self.passed}/{self.total}")

    def record(self, result: CheckResult) -> "RunTally":
        return RunTally(
            total=self.total + 1,
            passed=self.passed + (1 if result.passed else 0),
        )

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def success_rate(self) -> int:
        """Percentage of passed checks, rounded half up.

        Capped at 99 while any check failed, so 100 always means a clean run.
        This departs from plain rounding on purpose: above 200 checks a
        single failure would otherwise round up to 100 and exit 0.
        An empty tally verified nothing and rates 0.
        """
        if self.total == 0:
            return 0
        rate = (200 * self.passed + self.total) // (2 * self.total)
        if self.passed < self.total:
            return min(rate, 99)
        return rate
