"""End-to-end tests of the command line against a real interpreter."""

import sys
from pathlib import Path

import pytest

from phpt_runner.cli import EXIT_ERROR, EXIT_FAILURES, EXIT_SUCCESS, main


@pytest.fixture
def suite(tmp_path: Path) -> Path:
    """Create a test tree with passing, skipped and failing tests."""
    root = tmp_path / "suite"
    (root / "ext").mkdir(parents=True)
    (root / "ok.phpt").write_text("print('ok')\n")
    (root / "notes.txt").write_text("not a test\n")
    (root / "ext" / "needs.phpt").write_text("print('skip requires extension X')\n")
    return root


def run_main(*argv: str) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(list(argv))
    return exc_info.value.code  # type: ignore[return-value]


def test_passing_suite(suite: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Exits with 0 and prints progress and summary."""
    exit_code = run_main(str(suite), "-p", sys.executable, "-s")

    out = capsys.readouterr().out
    assert exit_code == EXIT_SUCCESS
    assert sorted(out.split("\n")[0]) == [".", "s"]
    assert "\n\nSkipped:\n\n1) needs\n   requires extension X\n" in out
    assert out.endswith("\n\nOK (2 tests, 1 skipped)\n")


def test_failing_suite_writes_logs(
    suite: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Exits with 1 and writes identical live log and a diff log."""
    (suite / "bad.phpt").write_text("print('actual')\n")
    (suite / "bad.expect").write_text("expected\n")
    log_file = tmp_path / "run.log"
    diff_file = tmp_path / "diff.log"

    exit_code = run_main(
        str(suite),
        "-p",
        sys.executable,
        "-log",
        str(log_file),
        "-dlog",
        str(diff_file),
    )

    out = capsys.readouterr().out
    assert exit_code == EXIT_FAILURES
    assert log_file.read_text() == out
    assert "1) bad\n   output mismatch\n" in out
    assert out.endswith("\nFAILURES! (3 tests, 1 failures, 1 skipped)\n")
    suite_path = suite.resolve()
    assert diff_file.read_text() == (
        f"1 {suite_path}/bad.phpt {suite_path}/output/bad.actual "
        f"{suite_path}/output/bad.expected\n"
    )
    assert (suite_path / "output" / "bad.actual").read_text() == "actual\n"


def test_empty_directory(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Reports no tests found and exits with 0."""
    exit_code = run_main(str(tmp_path), "-p", sys.executable)

    assert exit_code == EXIT_SUCCESS
    assert capsys.readouterr().out == "No tests found\n"


def test_missing_interpreter_aborts(
    suite: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Exits with 2 without a report when the interpreter is missing."""
    exit_code = run_main(str(suite), "-p", str(tmp_path / "missing-php"))

    assert exit_code == EXIT_ERROR
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("config_json", ['[1]', '"x"', '{"timeout": "soon"}'])
def test_invalid_executor_config_aborts(
    suite: Path, config_json: str, capsys: pytest.CaptureFixture[str]
) -> None:
    """Exits with 2 without a report when the executor config is not valid."""
    exit_code = run_main(
        str(suite), "-p", sys.executable, "--executor-config", config_json
    )

    assert exit_code == EXIT_ERROR
    assert capsys.readouterr().out == ""
