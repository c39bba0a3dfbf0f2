"""
Configuration loading for commit_wizard.

Provides a loader for the ``.commit-wizard.json`` file used by the AI
suggestion path. See :mod:`commit_wizard.config.loader` for
implementation details.
"""

from .loader import ConfigError, OpenAIConfig, load_config  # noqa: F401
