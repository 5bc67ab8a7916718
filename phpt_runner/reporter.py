"""Terminal, live-log and diff-log reporting of a test run."""

import sys
from dataclasses import dataclass, field
from typing import Any, TextIO

from phpt_runner.discovery import output_basename
from phpt_runner.models.result import ResultAggregator, TestOutcome

STATUS_SYMBOLS = {
    "passed": ".",
    "skipped": "s",
    "failed": "F",
}


@dataclass(frozen=True, kw_only=True)
class Reporter:
    """Writes the run report.

    Every piece of text goes to the output stream and, when given, to the live
    log, so both receive identical bytes.
    """

    stream: TextIO = field(default_factory=lambda: sys.stdout, repr=False)
    live_log: TextIO | None = field(default=None, repr=False)
    diff_log: TextIO | None = field(default=None, repr=False)

    def out(self, text: str) -> None:
        """Write text to the output stream and the live log."""
        self.stream.write(text)
        self.stream.flush()
        if self.live_log is not None:
            self.live_log.write(text)
            self.live_log.flush()

    def progress(self, outcome: TestOutcome) -> None:
        """Emit the progress character of a single outcome."""
        self.out(STATUS_SYMBOLS[outcome.status])

    def report(self, result: ResultAggregator, *, display_skipped: bool) -> bool:
        """Write the end-of-run report and return whether the run succeeded."""
        summary = result.summary()

        if display_skipped and summary.skipped:
            self.out("\n\nSkipped:\n")
            for index, outcome in enumerate(result.skipped, start=1):
                self._detail(index, outcome)

        if not summary.total:
            self.out("No tests found\n")
            return True

        if summary.failed:
            self.out("\n\nFailures:\n")
            for index, outcome in enumerate(result.failed, start=1):
                self._detail(index, outcome)
                self.diff(index, outcome.path)
            self.out(
                f"\nFAILURES! ({summary.total} tests, {summary.failed} failures, "
                f"{summary.skipped} skipped)\n"
            )
            return False

        self.out(f"\n\nOK ({summary.total} tests, {summary.skipped} skipped)\n")
        return True

    def diff(self, index: int, path: str) -> None:
        """Write a machine-parsable diff-log line for a failed test."""
        if self.diff_log is None:
            return
        base = output_basename(path)
        self.diff_log.write(f"{index} {path} {base}.actual {base}.expected\n")
        self.diff_log.flush()

    def _detail(self, index: int, outcome: TestOutcome) -> None:
        self.out(
            f"\n{index}) {outcome.name}\n   {outcome.message}\n   {outcome.path}\n"
        )


def format_summary(result: ResultAggregator) -> dict[str, Any]:
    """Format a run result for JSON output."""
    summary = result.summary()
    outcomes = [*result.passed, *result.skipped, *result.failed]
    return {
        "total": summary.total,
        "passed": summary.passed,
        "failed": summary.failed,
        "skipped": summary.skipped,
        "results": [
            {
                "status": outcome.status,
                "name": outcome.name,
                "path": outcome.path,
                "message": outcome.message,
            }
            for outcome in outcomes
        ],
    }
