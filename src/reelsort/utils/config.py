"""Config loading for reelsort provider credentials.

The config file is a JSON object holding the TMDB and TVDB API keys and an
optional request timeout:

    {"tmdb_api_key": "...", "tvdb_api_key": "...", "timeout": 10}

Each value can be overridden from the environment (``REELSORT_TMDB_API_KEY``,
``REELSORT_TVDB_API_KEY``, ``REELSORT_TIMEOUT``), giving the precedence
env > config file > default. The file itself is still required.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from reelsort.errors import ConfigError
from reelsort.metadata.models import DEFAULT_TIMEOUT, ProviderContext

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config.json")


class AppConfig(BaseModel):
    """Provider credentials and transport settings loaded at startup."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    tmdb_api_key: str = ""
    tvdb_api_key: str = ""
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    def provider_context(self) -> ProviderContext:
        """Build the ProviderContext handed to metadata clients."""
        return ProviderContext(
            tmdb_api_key=self.tmdb_api_key,
            tvdb_api_key=self.tvdb_api_key,
            timeout=self.timeout,
        )


def _make_env_var_name(key: str, prefix: str = "REELSORT_") -> str:
    """Convert a config key to an uppercase ENV var name.

    Example: "tmdb_api_key" -> "REELSORT_TMDB_API_KEY".
    """
    return prefix + key.upper()


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    merged = dict(data)
    for key in AppConfig.model_fields:
        env_var = _make_env_var_name(key)
        if env_var in os.environ:
            logger.debug("Config key %s overridden by %s", key, env_var)
            merged[key] = os.environ[env_var]
    return merged


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load and validate the JSON config file.

    Args:
        path: Location of the config file.

    Returns:
        The validated AppConfig.

    Raises:
        ConfigError: If the file cannot be read, is not valid JSON, is not a
            JSON object, or holds values of the wrong type.
    """
    logger.debug("Loading config from: %s", path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"config file {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a JSON object")
    try:
        config = AppConfig.model_validate(_apply_env_overrides(data))
    except ValidationError as e:
        raise ConfigError(f"invalid config file {path}: {e}") from e
    logger.debug("Config loaded successfully")
    return config
