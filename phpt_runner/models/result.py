"""Models for test outcomes and their aggregation."""

from dataclasses import dataclass, field
from typing import Literal

OutcomeStatus = Literal["passed", "skipped", "failed"]


@dataclass(frozen=True, kw_only=True)
class TestOutcome:
    """Classified result of running one test file.

    Skipped and failed outcomes carry a diagnostic message.
    """

    __test__ = False

    status: OutcomeStatus
    name: str
    path: str
    message: str | None = None


@dataclass(frozen=True, kw_only=True)
class RunSummary:
    """Counts of a run."""

    total: int
    passed: int
    failed: int
    skipped: int


@dataclass(kw_only=True)
class ResultAggregator:
    """Append-only collection of the outcomes of one run, in encounter order."""

    passed: list[TestOutcome] = field(default_factory=list)
    skipped: list[TestOutcome] = field(default_factory=list)
    failed: list[TestOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Number of recorded outcomes."""
        return len(self.passed) + len(self.skipped) + len(self.failed)

    def record(self, outcome: TestOutcome) -> None:
        """Append the outcome to the collection matching its status.

        Raises:
            ValueError: If the outcome has an unknown status

        """
        match outcome.status:
            case "passed":
                self.passed.append(outcome)
            case "skipped":
                self.skipped.append(outcome)
            case "failed":
                self.failed.append(outcome)
            case _:
                raise ValueError(f"Unknown outcome status '{outcome.status}'")

    def summary(self) -> RunSummary:
        """Return the current counts."""
        return RunSummary(
            total=self.total,
            passed=len(self.passed),
            failed=len(self.failed),
            skipped=len(self.skipped),
        )
