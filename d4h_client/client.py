"""API client for D4H Team Manager."""

from d4h_client.config.settings import load_config
from d4h_client.services.custom_field import CustomFieldService
from d4h_client.services.group import GroupService
from d4h_client.services.member import MemberService


class D4HClient(MemberService, GroupService, CustomFieldService):
    """Client exposing every D4H service over one HTTP session."""

    @classmethod
    def from_config(cls, path=None, session=None, **overrides):
        """Create a client from a YAML file and D4H_* environment variables."""
        return cls(load_config(path, **overrides), session=session)
