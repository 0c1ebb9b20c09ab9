"""Custom field service for D4H API."""

import logging

from d4h_client.core.auth import AuthManager
from d4h_client.core.reconciler import reconcile_custom_fields

logger = logging.getLogger(__name__)


class CustomFieldService(AuthManager):
    """Service for custom field operations."""

    def update_custom_fields(self, entity, updates, only_member_edit_own=False):
        """Write custom field values for an entity in a single request.

        ``entity`` must have been fetched with its custom fields. Fields the
        caller does not change keep their fetched values, see
        ``reconcile_custom_fields``. ``updates`` itself is left untouched.

        Args:
            entity (Entity): Previously fetched member, group, ...
            updates (list): CustomFieldUpdate objects or ``{"id", "value"}`` dicts
            only_member_edit_own (bool): Only allow fields members may edit themselves

        Returns:
            list: The CustomFieldUpdate entries that were sent, empty if nothing was sent
        """
        updates = list(updates)

        # No updates, no request
        if not updates:
            logger.debug("No custom field updates for %s %s, skipping request", entity.type.value, entity.id)
            return []

        fields = reconcile_custom_fields(entity.custom_fields, updates, only_member_edit_own)

        url = self.build_url('team', 'custom-fields', entity.type.value, entity.id)
        payload = {'fields': [field.model_dump(mode='json') for field in fields]}
        self.send_request('PUT', url, json=payload)

        logger.info("Updated %d custom field(s) on %s %s", len(fields), entity.type.value, entity.id)
        return fields
