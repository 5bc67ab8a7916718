"""Process executor implementation."""

import logging
import os
import re
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

from phpt_runner.discovery import output_basename
from phpt_runner.errors import ExecutorError
from phpt_runner.executors.base import TestExecutor
from phpt_runner.executors.process.config import ProcessExecutorConfig
from phpt_runner.models.config import InterpreterConfig
from phpt_runner.models.result import TestOutcome

log = logging.getLogger(__name__)

SKIP_PATTERN = re.compile(r"^skip(?:ped)?\b[\s:-]*(?P<reason>.*)$", re.IGNORECASE)


@dataclass(frozen=True, kw_only=True)
class ProcessExecutor(TestExecutor):
    """Runs ``<binary> <args...> <test>`` and classifies the process result.

    A test is skipped when its output starts with "skip", fails on a non-zero
    exit status or when its output differs from the sibling expect file, and
    passes otherwise.
    """

    config: ProcessExecutorConfig = field(default_factory=ProcessExecutorConfig)

    @classmethod
    def from_config(cls, config: ProcessExecutorConfig) -> "ProcessExecutor":
        """Create executor from validated configuration."""
        return cls(config=config)

    def execute(self, test_path: str, interpreter: InterpreterConfig) -> TestOutcome:
        """Run the test in a child process and wait for it to finish."""
        name = derive_test_name(test_path)
        test_file = Path(test_path).absolute()
        command = [interpreter.binary, *interpreter.args, str(test_file)]
        env = {**os.environ, **interpreter.environment}

        log.debug("Running %s", command)
        try:
            completed = subprocess.run(
                command,
                cwd=test_file.parent,
                env=env,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self.config.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            return TestOutcome(
                status="failed",
                name=name,
                path=test_path,
                message=f"timed out after {self.config.timeout} seconds",
            )
        except OSError as e:
            raise ExecutorError(
                f"Cannot run interpreter '{interpreter.binary}': {e.strerror or e}"
            ) from e

        if (skip_reason := parse_skip_reason(completed.stdout)) is not None:
            return TestOutcome(
                status="skipped", name=name, path=test_path, message=skip_reason
            )

        if completed.returncode != 0:
            return TestOutcome(
                status="failed",
                name=name,
                path=test_path,
                message=last_line(completed.stderr)
                or last_line(completed.stdout)
                or f"exited with status {completed.returncode}",
            )

        expected = self._read_expected(test_path)
        if expected is not None and (
            normalize(completed.stdout) != normalize(expected)
        ):
            write_output_pair(test_path, completed.stdout, expected)
            return TestOutcome(
                status="failed", name=name, path=test_path, message="output mismatch"
            )

        return TestOutcome(status="passed", name=name, path=test_path)

    def _read_expected(self, test_path: str) -> str | None:
        expect_file = Path(test_path).with_suffix(f".{self.config.expect_extension}")
        try:
            return expect_file.read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError:
            return None


def derive_test_name(test_path: str) -> str:
    """Human-readable name of a test: its file name without extension."""
    return Path(test_path).stem


def parse_skip_reason(output: str) -> str | None:
    """Return the skip reason if the output marks the test as skipped."""
    first_line = output.lstrip().partition("\n")[0].strip()
    if (match := SKIP_PATTERN.match(first_line)) is None:
        return None
    return match["reason"].strip() or "skipped"


def last_line(text: str) -> str:
    """Last non-empty line of text, or an empty string."""
    for line in reversed(text.splitlines()):
        if line.strip():
            return line.strip()
    return ""


def normalize(output: str) -> str:
    """Drop trailing whitespace of each line and trailing blank lines."""
    return "\n".join(line.rstrip() for line in output.splitlines()).rstrip("\n")


def write_output_pair(test_path: str, actual: str, expected: str) -> None:
    """Write actual and expected output next to the test for later diffing."""
    base = output_basename(test_path)
    Path(base).parent.mkdir(parents=True, exist_ok=True)
    Path(f"{base}.actual").write_text(actual, encoding="utf-8")
    Path(f"{base}.expected").write_text(expected, encoding="utf-8")
