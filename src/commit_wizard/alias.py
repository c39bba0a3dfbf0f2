"""
Git alias setup.

Registers ``git cw`` as a global Git alias for ``commit-wizard``. Exposed
as the ``commit-wizard-alias`` console script.
"""

from __future__ import annotations

import subprocess
import sys
from typing import List

from commit_wizard.progress import print_error, print_success, print_warning

ALIAS_NAME = "cw"
ALIAS_COMMAND: List[str] = ["git", "config", "--global", f"alias.{ALIAS_NAME}", "!commit-wizard"]


def setup_git_alias() -> bool:
    """Configure the alias; return True on success."""
    try:
        subprocess.run(ALIAS_COMMAND, check=True, capture_output=True, text=True)
    except (subprocess.CalledProcessError, FileNotFoundError) as exc:
        manual = 'git config --global alias.cw "!commit-wizard"'
        print_warning(f"Could not configure the Git alias. Run this command manually:\n  $ {manual}")
        detail = exc.stderr.strip() if isinstance(exc, subprocess.CalledProcessError) and exc.stderr else str(exc)
        print_error(f"Details: {detail}")
        return False
    print_success(f"Git alias configured! You can now run 'git {ALIAS_NAME}' to start the wizard.")
    return True


def main() -> None:
    sys.exit(0 if setup_git_alias() else 1)
