"""Process executor manifest."""

from phpt_runner.executors.manifest import ExecutorManifest
from phpt_runner.executors.process.config import ProcessExecutorConfig
from phpt_runner.executors.process.executor import ProcessExecutor

process_manifest = ExecutorManifest(
    config_cls=ProcessExecutorConfig,
    executor_factory=ProcessExecutor.from_config,
)
