"""d4h-client: typed client for the D4H Team Manager API."""

import logging

from .client import D4HClient
from .config.settings import ClientConfig, load_config
from .core.errors import (
    D4HError,
    ConfigError,
    D4HRequestError,
    CustomFieldError,
    MissingSnapshotError,
    PermissionDeniedError,
    BundledFieldUnsupportedError,
    DuplicateFieldUpdateError,
)
from .core.reconciler import reconcile_custom_fields
from .models import (
    EntityType,
    Entity,
    Member,
    Group,
    MemberUpdate,
    CustomFieldValue,
    CustomFieldUpdate,
    stamp_entity,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'D4HClient',
    'ClientConfig',
    'load_config',
    'D4HError',
    'ConfigError',
    'D4HRequestError',
    'CustomFieldError',
    'MissingSnapshotError',
    'PermissionDeniedError',
    'BundledFieldUnsupportedError',
    'DuplicateFieldUpdateError',
    'reconcile_custom_fields',
    'EntityType',
    'Entity',
    'Member',
    'Group',
    'MemberUpdate',
    'CustomFieldValue',
    'CustomFieldUpdate',
    'stamp_entity'
]
