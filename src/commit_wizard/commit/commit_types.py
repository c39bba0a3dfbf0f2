"""
Conventional commit types offered by the wizard.

The same closed set is shown in the interactive type picker and listed
in the prompt sent to the completion service.
"""

from typing import List, Tuple

# (value, label, description)
COMMIT_TYPES: List[Tuple[str, str, str]] = [
    ("feat", "New feature", "Adds a new feature"),
    ("fix", "Bug fix", "Fixes a bug"),
    ("init", "Initialization", "Initializes the project"),
    ("docs", "Documentation", "Documentation-only changes"),
    ("style", "Code style", "Formatting, whitespace, semicolons; no behaviour change"),
    ("refactor", "Refactoring", "Restructures code without fixing a bug or adding a feature"),
    ("perf", "Performance", "Improves performance"),
    ("test", "Tests", "Adds or updates tests"),
    ("revert", "Revert", "Reverts a previous commit"),
    ("build", "Build", "Changes to the build system"),
    ("chore", "Chore", "Tooling, dependencies and other maintenance"),
    ("ci", "Continuous integration", "Changes to CI configuration"),
]

COMMIT_TYPE_VALUES: List[str] = [value for value, _, _ in COMMIT_TYPES]

DEFAULT_COMMIT_TYPE = "chore"
