"""Executor running each test in a fresh interpreter process."""

from phpt_runner.executors.process.config import ProcessExecutorConfig
from phpt_runner.executors.process.executor import ProcessExecutor
from phpt_runner.executors.process.manifest import process_manifest

__all__ = ["ProcessExecutor", "ProcessExecutorConfig", "process_manifest"]
