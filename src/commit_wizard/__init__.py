"""
Top-level package for commit_wizard.

This package exposes the main CLI entry point via the
``commit_wizard.cli`` module.
"""

from importlib.metadata import PackageNotFoundError, version

__all__ = ["__version__"]

try:
    __version__ = version("commit-wizard")
except PackageNotFoundError:
    # Fallback when running from a source checkout that was never installed
    __version__ = "0.0.0"
