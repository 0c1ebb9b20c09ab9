"""Custom field reconciliation.

From the API documentation for PUT /team/custom-fields/{entity_type}/{entity_id}:
the write is distinguished by bundle. If one field of a bundle (or one
unbundled field) is included, every field of that bundle (or every unbundled
field) must be included too.

To avoid partial writes, every eligible unbundled field from the fetched
entity is carried into the request with its original value unless the caller
changes it. Bundled fields are not supported and are rejected outright.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Union

from d4h_client.core.errors import (
    BundledFieldPermissionError,
    BundledFieldUnsupportedError,
    DuplicateFieldUpdateError,
    MissingSnapshotError,
    PermissionDeniedError,
)
from d4h_client.models import CustomFieldUpdate, CustomFieldValue

logger = logging.getLogger(__name__)


def _as_update(update: Union[CustomFieldUpdate, dict]) -> CustomFieldUpdate:
    if isinstance(update, CustomFieldUpdate):
        return update
    return CustomFieldUpdate.model_validate(update)


def reconcile_custom_fields(
    snapshot: Optional[Sequence[CustomFieldValue]],
    updates: Iterable[Union[CustomFieldUpdate, dict]],
    only_member_edit_own: bool = False,
) -> List[CustomFieldUpdate]:
    """Merge proposed updates with the fetched custom field values.

    Args:
        snapshot: Custom fields observed when the entity was fetched.
        updates: Proposed ``{id, value}`` changes.
        only_member_edit_own: Restrict the update to fields members may edit themselves.

    Returns:
        A new list: the caller's updates in their original order, followed by
        the original value of every other field that is unbundled and
        within the edit scope, in snapshot order.

    Raises:
        MissingSnapshotError: the entity was fetched without custom fields.
        PermissionDeniedError: a field outside the member's edit scope is updated.
        BundledFieldUnsupportedError: a bundled field is updated.
        DuplicateFieldUpdateError: a field id appears twice in ``updates``.
    """
    reconciled = [_as_update(update) for update in updates]

    if snapshot is None:
        # Nothing to write, so a missing baseline does not matter
        if not reconciled:
            return []
        raise MissingSnapshotError()

    proposed = set()
    for update in reconciled:
        if update.id in proposed:
            raise DuplicateFieldUpdateError(update.id)
        proposed.add(update.id)

    backfilled = 0
    for field in snapshot:
        bundled = field.bundle is not None
        out_of_scope = only_member_edit_own and not field.member_edit_own

        if field.id in proposed:
            if out_of_scope and bundled:
                raise BundledFieldPermissionError(field.id)
            if out_of_scope:
                raise PermissionDeniedError(field.id)
            if bundled:
                raise BundledFieldUnsupportedError(field.id)
        elif not bundled and not out_of_scope:
            reconciled.append(CustomFieldUpdate(id=field.id, value=field.value))
            backfilled += 1

    logger.debug("Reconciled %d custom field update(s), %d backfilled from the original entity",
                 len(reconciled), backfilled)
    return reconciled
