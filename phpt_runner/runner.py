"""Test runner coordinating discovery, execution and reporting."""

import enum
import logging
import sys
from dataclasses import dataclass, field
from typing import TextIO

from phpt_runner.discovery import is_test_file, walk
from phpt_runner.executors.base import TestExecutor
from phpt_runner.models.config import RunConfig
from phpt_runner.models.result import ResultAggregator
from phpt_runner.reporter import Reporter

log = logging.getLogger(__name__)


class RunState(enum.StrEnum):
    """Lifecycle of a single run."""

    IDLE = "idle"
    WALKING = "walking"
    COMPLETED = "completed"


@dataclass(kw_only=True)
class TestRunner:
    """Runs every test file below the configured path, one at a time.

    The report goes to stream and to the live and diff logs of the config.
    """

    __test__ = False

    config: RunConfig
    executor: TestExecutor
    stream: TextIO = field(default_factory=lambda: sys.stdout, repr=False)
    reporter: Reporter = field(init=False, repr=False)
    state: RunState = RunState.IDLE
    result: ResultAggregator = field(default_factory=ResultAggregator)

    def __post_init__(self) -> None:
        """Build the reporter from the configured sinks."""
        self.reporter = Reporter(
            stream=self.stream,
            live_log=self.config.live_log,
            diff_log=self.config.diff_log,
        )

    def run(self) -> bool:
        """Run all tests and report them.

        Returns:
            True when no test failed, including when no tests were found

        Raises:
            InvalidPathError: If the configured path does not exist
            ExecutorError: If the executor cannot run tests at all; the run is
                aborted without a report

        """
        self.result = ResultAggregator()
        self.state = RunState.WALKING
        log.info("Running tests in %s", self.config.path)

        for path in walk(self.config.path):
            if not is_test_file(path):
                continue

            outcome = self.executor.execute(path, self.config.interpreter)
            log.debug("Test %s %s", outcome.name, outcome.status)
            self.result.record(outcome)
            self.reporter.progress(outcome)

        self.state = RunState.COMPLETED
        summary = self.result.summary()
        log.debug(
            "Run completed: total=%d passed=%d failed=%d skipped=%d",
            summary.total,
            summary.passed,
            summary.failed,
            summary.skipped,
        )
        return self.reporter.report(
            self.result, display_skipped=self.config.display_skipped
        )
