"""Services package for D4H API."""

from .member import MemberService
from .group import GroupService
from .custom_field import CustomFieldService

__all__ = [
    'MemberService',
    'GroupService',
    'CustomFieldService'
]
