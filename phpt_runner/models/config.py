"""Configuration of a single test run."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TextIO

from pydantic import Field

from phpt_runner.models.base import Model

DEFAULT_INTERPRETER = "php-cgi"


class InterpreterConfig(Model):
    """How to invoke the interpreter for each test."""

    binary: str = Field(
        default=DEFAULT_INTERPRETER, min_length=1, description="Interpreter binary"
    )
    args: Sequence[str] = Field(
        default=(), description="Extra arguments placed before the test path"
    )
    environment: Mapping[str, str] = Field(
        default_factory=dict, description="Environment overrides for the process"
    )


@dataclass(frozen=True, kw_only=True)
class RunConfig:
    """Everything a run needs, fixed before the run starts.

    The sinks are opened and closed by the caller; the run only writes to them.
    """

    path: str
    interpreter: InterpreterConfig = field(default_factory=InterpreterConfig)
    display_skipped: bool = False
    live_log: TextIO | None = field(default=None, repr=False)
    diff_log: TextIO | None = field(default=None, repr=False)
