"""Run .phpt test files against an interpreter binary."""
