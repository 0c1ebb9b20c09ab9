"""API configuration settings."""

import os
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from d4h_client.core.errors import ConfigError

# API Base URL - several regional endpoints exist, this is the default
D4H_BASE_URL = "https://api.team-manager.us.d4h.com/v3"

# Pagination settings
D4H_FETCH_LIMIT = 250  # Largest page size the API accepts

# Seconds to wait for the server before giving up on a request
DEFAULT_TIMEOUT = 30

# Environment variables that override values read from the config file
ENV_OVERRIDES = {
    'token': 'D4H_TOKEN',
    'base_url': 'D4H_BASE_URL',
    'page_size': 'D4H_PAGE_SIZE',
    'timeout': 'D4H_TIMEOUT',
}


class ClientConfig(BaseModel):
    """Connection settings for one D4H account."""
    token: str = Field(..., min_length=1, repr=False)
    base_url: str = D4H_BASE_URL
    page_size: int = Field(D4H_FETCH_LIMIT, ge=1, le=D4H_FETCH_LIMIT)
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0)


def _load_yaml_file(file_path):
    """Load a YAML mapping from disk."""
    file_path = Path(file_path)
    try:
        with open(file_path, 'r', encoding='utf-8') as file:
            data = yaml.safe_load(file)
    except FileNotFoundError:
        raise ConfigError(f"Configuration file not found: {file_path}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing YAML file {file_path}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file {file_path} must contain a mapping")
    # Allow the settings to live under a top-level "d4h" key
    return data.get('d4h', data)


def load_config(path: Optional[Union[str, Path]] = None, **overrides) -> ClientConfig:
    """Build a ClientConfig from a YAML file, the environment and keyword overrides.

    Later sources win: file values, then D4H_* environment variables, then
    any keyword arguments that are not None.
    """
    values = _load_yaml_file(path) if path is not None else {}

    for key, env_name in ENV_OVERRIDES.items():
        env_value = os.getenv(env_name)
        if env_value:
            values[key] = env_value

    values.update({key: value for key, value in overrides.items() if value is not None})

    if not values.get('token'):
        raise ConfigError("No API token configured. Set D4H_TOKEN or add 'token' to the config file.")

    try:
        return ClientConfig(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid client configuration: {e}") from e
