"""Errors that abort a whole test run."""


class HarnessError(Exception):
    """Base class for errors that make the harness itself unusable."""


class InvalidPathError(HarnessError):
    """Raised when a test path names neither a file nor a directory."""


class ExecutorError(HarnessError):
    """Raised when an executor cannot run a test at all."""
