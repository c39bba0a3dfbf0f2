"""
Configuration loader for commit_wizard.

The AI suggestion path needs a JSON configuration file named
``.commit-wizard.json``. It is looked up in this order:

1. the path given with ``--config`` (resolved against the working
   directory; it must exist),
2. the current working directory,
3. the user's home directory.

The file holds a single ``openai`` section::

    {
      "openai": {
        "apiKey": "sk-...",
        "baseURL": "https://api.openai.com/v1",
        "model": "gpt-4o-mini",
        "temperature": 0.7,
        "maxTokens": 150,
        "exclude": ["dist", "package-lock.json"]
      }
    }

If the file is missing, malformed, or missing required keys, a
:class:`ConfigError` is raised.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple


logger = logging.getLogger(__name__)
# Attach a null handler to avoid "No handler" warnings in environments
# where logging has not been configured. The CLI configures logging
# explicitly with ``force=True`` when it runs.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


CONFIG_FILE_NAME = ".commit-wizard.json"

DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 150

# JSON key -> attribute name on OpenAIConfig
_REQUIRED_KEYS = (("apiKey", "api_key"), ("baseURL", "base_url"), ("model", "model"))
_OPTIONAL_KEYS = ("temperature", "maxTokens", "exclude")


class ConfigError(Exception):
    """Raised when the configuration file is missing or invalid."""

    pass


@dataclass(frozen=True)
class OpenAIConfig:
    """Validated settings for the completion service.

    Attributes
    ----------
    api_key : str
        Bearer token sent with every completion request.
    base_url : str
        Base URL of an OpenAI compatible API, e.g.
        ``"https://api.openai.com/v1"``.
    model : str
        Model name passed through to the API.
    temperature : float
        Sampling temperature. Defaults to ``0.7``.
    max_tokens : int
        Upper bound on generated tokens. Defaults to ``150``.
    exclude : Tuple[str, ...]
        Path prefixes or path segments whose changes are never sent to
        the completion service.
    """

    api_key: str
    base_url: str
    model: str
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS
    exclude: Tuple[str, ...] = ()


def _search_directories() -> List[Path]:
    return [Path.cwd(), Path.home()]


def find_config_file(custom_path: Optional[str] = None) -> Path:
    """Return the configuration file to use.

    Raises
    ------
    ConfigError
        If ``custom_path`` does not exist, or no ``.commit-wizard.json``
        is found in the working directory or the home directory.
    """
    if custom_path:
        path = Path(custom_path)
        if not path.is_absolute():
            path = Path.cwd() / path
        if not path.exists():
            logger.error("Configuration file '%s' does not exist", path)
            raise ConfigError(f"Configuration file not found: {custom_path}")
        return path

    searched = _search_directories()
    for directory in searched:
        candidate = directory / CONFIG_FILE_NAME
        if candidate.exists():
            return candidate

    locations = ", ".join(str(d) for d in searched)
    raise ConfigError(
        f"No {CONFIG_FILE_NAME} found. Create one in the project directory or "
        f"your home directory (searched: {locations}), or pass --config <path>."
    )


def _validate_section(section: Dict[str, Any]) -> None:
    missing = [
        key for key, _ in _REQUIRED_KEYS
        if not isinstance(section.get(key), str) or not section.get(key).strip()
    ]
    if missing:
        raise ConfigError(
            f"OpenAI configuration is missing required fields: {', '.join(missing)}"
        )

    if "temperature" in section:
        value = section["temperature"]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError("'temperature' must be a number")
    if "maxTokens" in section:
        value = section["maxTokens"]
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ConfigError("'maxTokens' must be a positive integer")
    if "exclude" in section:
        value = section["exclude"]
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise ConfigError("'exclude' must be a list of strings")

    known = {key for key, _ in _REQUIRED_KEYS} | set(_OPTIONAL_KEYS)
    unknown = sorted(set(section) - known)
    if unknown:
        logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))


def load_config(custom_path: Optional[str] = None) -> OpenAIConfig:
    """Locate, read and validate the configuration file.

    Parameters
    ----------
    custom_path : str, optional
        Explicit path given on the command line. When omitted the
        working directory and the home directory are searched.

    Returns
    -------
    OpenAIConfig
        The validated configuration with defaults applied.

    Raises
    ------
    ConfigError
        If the file is missing, unreadable, not valid JSON, lacks the
        ``openai`` section, or has missing or mistyped fields.
    """
    config_path = find_config_file(custom_path)

    try:
        content = config_path.read_text(encoding="utf-8")
        data = json.loads(content)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read or parse configuration file: %s", exc)
        raise ConfigError(f"Invalid configuration file {config_path}: {exc}") from exc

    section = data.get("openai") if isinstance(data, dict) else None
    if not isinstance(section, dict):
        raise ConfigError(f"Missing 'openai' section in {config_path}")

    _validate_section(section)

    config = OpenAIConfig(
        api_key=section["apiKey"],
        base_url=section["baseURL"],
        model=section["model"],
        temperature=float(section.get("temperature", DEFAULT_TEMPERATURE)),
        max_tokens=section.get("maxTokens", DEFAULT_MAX_TOKENS),
        exclude=tuple(section.get("exclude", [])),
    )
    logger.debug("Loaded configuration from: %s", config_path)
    return config
