"""Executor manifest definition for the plugin system."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel

from phpt_runner.executors.base import TestExecutor

ConfigT = TypeVar("ConfigT", bound=BaseModel)


@dataclass(frozen=True, kw_only=True)
class ExecutorManifest(Generic[ConfigT]):
    """Manifest describing an executor plugin.

    Holds the executor's configuration class and the factory that builds the
    executor from a validated configuration.
    """

    config_cls: type[ConfigT]
    executor_factory: Callable[[ConfigT], TestExecutor]
