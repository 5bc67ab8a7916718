"""CLI entry point for the phpt test runner."""

import argparse
import json
import logging
import os
import sys
from collections.abc import Sequence
from contextlib import ExitStack
from pathlib import Path
from typing import Any

from phpt_runner.errors import HarnessError, InvalidPathError
from phpt_runner.executors.loading import ExecutorNotFoundError, load_executor_manifest
from phpt_runner.models.config import DEFAULT_INTERPRETER, InterpreterConfig, RunConfig
from phpt_runner.reporter import format_summary
from phpt_runner.runner import TestRunner

LIBRARY_PATH_VARIABLE = "LD_LIBRARY_PATH"

EXIT_SUCCESS = 0
EXIT_FAILURES = 1
EXIT_ERROR = 2

log = logging.getLogger("phpt_runner")


class InterpreterArgAction(argparse.Action):
    """Append ``<flag> <value>`` to the interpreter arguments, keeping CLI order."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        """Store the flag and its value."""
        items = list(getattr(namespace, self.dest) or [])
        items.extend((self.const, values))
        setattr(namespace, self.dest, items)


def resolve_test_path(path: str) -> str:
    """Resolve the test path to an absolute path that must exist."""
    resolved = Path(path).resolve()
    if not resolved.exists():
        raise InvalidPathError(f"Invalid path '{path}'")
    return str(resolved)


def build_interpreter_config(
    binary: str,
    args: Sequence[str] = (),
    library_path: str | None = None,
) -> InterpreterConfig:
    """Build interpreter configuration from command line values."""
    environment = {LIBRARY_PATH_VARIABLE: library_path} if library_path else {}
    return InterpreterConfig(binary=binary, args=args, environment=environment)


def run(
    path: str,
    interpreter: InterpreterConfig,
    executor_key: str = "process",
    executor_config_json: str = "{}",
    display_skipped: bool = False,
    log_path: Path | None = None,
    diff_log_path: Path | None = None,
    json_report_path: Path | None = None,
) -> int:
    """Run the tests below path and return exit code."""
    log.debug("Loading executor: %s", executor_key)
    manifest = load_executor_manifest(executor_key)

    config = manifest.config_cls.model_validate_json(executor_config_json)
    executor = manifest.executor_factory(config)

    with ExitStack() as stack:
        live_log = (
            stack.enter_context(log_path.open("w", encoding="utf-8"))
            if log_path
            else None
        )
        diff_log = (
            stack.enter_context(diff_log_path.open("w", encoding="utf-8"))
            if diff_log_path
            else None
        )

        run_config = RunConfig(
            path=path,
            interpreter=interpreter,
            display_skipped=display_skipped,
            live_log=live_log,
            diff_log=diff_log,
        )
        runner = TestRunner(config=run_config, executor=executor)
        success = runner.run()

    if json_report_path:
        json_report_path.write_text(
            json.dumps(format_summary(runner.result), indent=2), encoding="utf-8"
        )

    return EXIT_SUCCESS if success else EXIT_FAILURES


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        prog="phpt-runner",
        description="Run .phpt test files against an interpreter binary",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=os.getcwd(),
        help="Test file or directory (default: current directory)",
    )
    parser.add_argument(
        "-p",
        "--interpreter",
        default=DEFAULT_INTERPRETER,
        help=f"Interpreter binary (default: {DEFAULT_INTERPRETER})",
    )
    parser.add_argument(
        "-c",
        dest="interpreter_args",
        action=InterpreterArgAction,
        const="-c",
        metavar="PATH",
        help="Pass -c PATH (configuration file) to the interpreter",
    )
    parser.add_argument(
        "-d",
        dest="interpreter_args",
        action=InterpreterArgAction,
        const="-d",
        metavar="KEY=VALUE",
        help="Pass -d KEY=VALUE (setting) to the interpreter",
    )
    parser.add_argument(
        "-l",
        "--library-path",
        help=f"Set {LIBRARY_PATH_VARIABLE} for the interpreter",
    )
    parser.add_argument(
        "--log",
        "-log",
        dest="log",
        type=Path,
        metavar="FILE",
        help="Write a copy of the output to FILE",
    )
    parser.add_argument(
        "--diff-log",
        "-dlog",
        dest="diff_log",
        type=Path,
        metavar="FILE",
        help="Write actual/expected file pairs of failed tests to FILE",
    )
    parser.add_argument(
        "-s",
        "--show-skipped",
        action="store_true",
        help="Display information about skipped tests",
    )
    parser.add_argument(
        "--executor",
        default="process",
        help="Executor key (default: process)",
    )
    parser.add_argument(
        "--executor-config",
        default="{}",
        help="JSON configuration for the executor",
    )
    parser.add_argument(
        "--json-report",
        type=Path,
        metavar="FILE",
        help="Write a JSON summary of the run to FILE",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        interpreter = build_interpreter_config(
            args.interpreter, args.interpreter_args or (), args.library_path
        )
        exit_code = run(
            path=resolve_test_path(args.path),
            interpreter=interpreter,
            executor_key=args.executor,
            executor_config_json=args.executor_config,
            display_skipped=args.show_skipped,
            log_path=args.log,
            diff_log_path=args.diff_log,
            json_report_path=args.json_report,
        )
    except (HarnessError, ExecutorNotFoundError, OSError, ValueError) as e:
        log.error("%s", e)
        sys.exit(EXIT_ERROR)

    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
