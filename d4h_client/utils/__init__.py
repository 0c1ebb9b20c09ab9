"""Helpers shared by the D4H services."""

from .decorators import paginate_response
from .query import build_query_params

__all__ = [
    'paginate_response',
    'build_query_params'
]
