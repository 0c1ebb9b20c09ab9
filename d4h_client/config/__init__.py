"""Configuration for the D4H client."""

from .settings import ClientConfig, load_config, D4H_BASE_URL, D4H_FETCH_LIMIT, DEFAULT_TIMEOUT

__all__ = [
    'ClientConfig',
    'load_config',
    'D4H_BASE_URL',
    'D4H_FETCH_LIMIT',
    'DEFAULT_TIMEOUT'
]
