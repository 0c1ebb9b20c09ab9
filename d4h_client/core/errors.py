"""Exceptions raised by the D4H client."""

from typing import Optional


class D4HError(Exception):
    """Base exception for everything raised by this package."""
    pass


class ConfigError(D4HError):
    """Raised when the client configuration is missing or invalid."""
    pass


class D4HRequestError(D4HError):
    """Raised when a request fails in transport or returns a non-2xx status."""

    def __init__(self, message: str, method: Optional[str] = None, url: Optional[str] = None,
                 status_code: Optional[int] = None, body: Optional[str] = None):
        self.method = method
        self.url = url
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class CustomFieldError(D4HError):
    """Base exception for custom field updates rejected before any write."""

    def __init__(self, message: str, field_id=None):
        self.field_id = field_id
        super().__init__(message)


class MissingSnapshotError(CustomFieldError):
    """The entity was fetched without its custom fields."""

    def __init__(self):
        super().__init__(
            "Cannot update custom fields for an entity with no custom fields. "
            "Ensure the original request included custom fields."
        )


class PermissionDeniedError(CustomFieldError):
    """An update touches a field the member may not edit themselves."""

    def __init__(self, field_id):
        super().__init__(
            f"only_member_edit_own specified, but custom field {field_id} is not member editable.",
            field_id=field_id,
        )


class BundledFieldUnsupportedError(CustomFieldError):
    """An update touches a field that belongs to a bundle."""

    def __init__(self, field_id):
        super().__init__(
            f"Custom field {field_id} is part of a bundle. Updating fields in a bundle is not supported.",
            field_id=field_id,
        )


class BundledFieldPermissionError(PermissionDeniedError, BundledFieldUnsupportedError):
    """A bundled field that is also outside the member's edit scope."""

    def __init__(self, field_id):
        CustomFieldError.__init__(
            self,
            f"Custom field {field_id} is part of a bundle and is not member editable.",
            field_id=field_id,
        )


class DuplicateFieldUpdateError(CustomFieldError):
    """The same custom field id appears more than once in an update batch."""

    def __init__(self, field_id):
        super().__init__(f"Custom field {field_id} is updated more than once.", field_id=field_id)
