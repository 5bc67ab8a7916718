"""Tests for executor loading module."""

import pytest

from phpt_runner.executors.loading import (
    ExecutorNotFoundError,
    load_executor_manifest,
)
from phpt_runner.executors.process import process_manifest


def test_load_executor_manifest_returns_manifest() -> None:
    """Loads executor manifest by key."""
    manifest = load_executor_manifest("process")

    assert manifest is process_manifest


def test_load_executor_manifest_raises_for_unknown_executor() -> None:
    """Raises ExecutorNotFoundError for unknown executor key."""
    with pytest.raises(ExecutorNotFoundError) as exc_info:
        load_executor_manifest("unknown-executor")

    assert "unknown-executor" in str(exc_info.value)
    assert "Available executors" in str(exc_info.value)
