"""Group service for D4H API."""

from d4h_client.core.auth import AuthManager
from d4h_client.models import Group
from d4h_client.utils.decorators import paginate_response
from d4h_client.utils.query import build_query_params


class GroupService(AuthManager):
    """Service for member group operations."""

    def get_group(self, context, context_id, group_id):
        """Get a single member group."""
        url = self.build_url(context, context_id, 'member-groups', group_id)
        return self.parse_item(Group.model_validate, self.get_json(url), url)

    @paginate_response(parse=Group.model_validate)
    def get_groups(self, context, context_id, member_id=None, title=None):
        """Get all member groups with pagination support, optionally filtered by member or title."""
        url = self.build_url(context, context_id, 'member-groups')
        return url, build_query_params(member_id=member_id, title=title)
