"""Configuration for the process executor."""

from pydantic import BaseModel, Field


class ProcessExecutorConfig(BaseModel):
    """Configuration for the process executor."""

    timeout: float | None = Field(default=None, gt=0)
    # Sibling file holding the expected stdout, e.g. "foo.expect" for "foo.phpt"
    expect_extension: str = "expect"
