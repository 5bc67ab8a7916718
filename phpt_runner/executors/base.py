"""Abstract base class for test executors."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from phpt_runner.models.config import InterpreterConfig
from phpt_runner.models.result import TestOutcome


@dataclass(frozen=True, kw_only=True)
class TestExecutor(ABC):
    """Runs one test file and classifies what happened.

    Implementations report ordinary failures and skips through the returned
    outcome. Only a problem that makes every test unrunnable, such as a
    missing interpreter binary, is raised as ExecutorError.
    """

    __test__ = False

    @abstractmethod
    def execute(self, test_path: str, interpreter: InterpreterConfig) -> TestOutcome:
        """Run a single test and return its outcome.

        Args:
            test_path: Path of the test file as discovered
            interpreter: Interpreter binary, arguments and environment

        Returns:
            Outcome carrying the test name, its path and, for skipped or
            failed tests, a diagnostic message

        Raises:
            ExecutorError: If the interpreter cannot be invoked at all

        """
