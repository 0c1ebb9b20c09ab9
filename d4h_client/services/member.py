"""Member service for D4H API."""

import logging
from functools import partial

from d4h_client.core.auth import AuthManager
from d4h_client.models import EntityType, MemberUpdate, stamp_entity
from d4h_client.utils.decorators import paginate_response
from d4h_client.utils.query import build_query_params

logger = logging.getLogger(__name__)


class MemberService(AuthManager):
    """Service for member operations."""

    def get_member(self, context, context_id, member_id, include_details=None):
        """Get a single member.

        Args:
            context (str): Owner of the resource, e.g. "team" or "organisation"
            context_id (int): ID of the team or organisation
            member_id (int): Member ID
            include_details (bool, optional): Ask for the detailed member record

        Returns:
            Member: The member, stamped with the member entity type
        """
        url = self.build_url(context, context_id, 'members', member_id)
        params = build_query_params(include_details=include_details)
        data = self.get_json(url, params=params)
        return self.parse_item(partial(stamp_entity, EntityType.MEMBER), data, url)

    @paginate_response(parse=partial(stamp_entity, EntityType.MEMBER))
    def get_members(self, context, context_id, group_id=None, include_details=None,
                    include_custom_fields=None):
        """Get all members with pagination support."""
        url = self.build_url(context, context_id, 'members')
        params = build_query_params(
            group_id=group_id,
            include_details=include_details,
            include_custom_fields=include_custom_fields
        )
        return url, params

    def update_member(self, context, context_id, member_id, updates):
        """Update a member with a partial body.

        Args:
            updates (MemberUpdate | dict): Fields to change. Nothing is sent when empty.
        """
        if isinstance(updates, MemberUpdate):
            payload = updates.to_payload()
        else:
            payload = dict(updates)

        # No updates, no request
        if not payload:
            logger.debug("No member updates for %s/%s/%s, skipping request", context, context_id, member_id)
            return

        url = self.build_url(context, context_id, 'members', member_id)
        self.send_request('PUT', url, json=payload)
        logger.info("Updated member %s (%s)", member_id, ', '.join(sorted(payload)))
