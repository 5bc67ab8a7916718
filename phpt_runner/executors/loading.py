"""Look up the executor that runs each test file.

Executors are plugins: a package registers an ``ExecutorManifest`` under the
``phpt_runner.executors`` entry point group and the CLI selects it by key with
``--executor``. The built-in ``process`` executor is registered the same way.
"""

from importlib.metadata import entry_points
from typing import Any

from phpt_runner.executors.manifest import ExecutorManifest

ENTRY_POINT_GROUP = "phpt_runner.executors"


class ExecutorNotFoundError(Exception):
    """Raised when no executor is registered under the requested key."""


def load_executor_manifest(key: str) -> ExecutorManifest[Any]:
    """Find the manifest of the executor registered under key.

    Raises:
        ExecutorNotFoundError: If no installed package registers the key; the
            message lists the keys that are registered

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)
    manifest: ExecutorManifest[Any]

    if key in entries.names:
        manifest = entries[key].load()
        return manifest

    raise ExecutorNotFoundError(
        f"Executor '{key}' not found. Available executors: {sorted(entries.names)}"
    )
