"""Allow running the test runner with ``python -m phpt_runner``."""

from phpt_runner.cli import main

main()
