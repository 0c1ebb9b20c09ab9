"""Decorators for API response handling."""

from functools import wraps


def paginate_response(parse=None):
    """Decorator for handling pagination in API responses.

    The decorated method returns either a URL or a ``(url, params)`` tuple.
    Every page is fetched and, if ``parse`` is given, each raw item is passed
    through it. Callers may pass ``show_progress=True`` to the decorated method.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(self, *args, show_progress=False, **kwargs):
            result = func(self, *args, **kwargs)

            if isinstance(result, tuple):
                url, params = result
            else:
                url, params = result, {}

            items = self.handle_paginated_response(url, params=params, show_progress=show_progress)
            if parse is None:
                return items
            return [self.parse_item(parse, item, url) for item in items]

        return wrapper
    return decorator
