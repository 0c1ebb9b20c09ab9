"""Query string helpers."""


def build_query_params(**options):
    """Build query parameters from keyword options.

    Options left as None are not sent. Booleans are sent as the string
    "true" and dropped when False. Everything else is sent as ``str(value)``.
    """
    params = {}
    for name, value in options.items():
        if value is None or value is False:
            continue
        params[name] = 'true' if value is True else str(value)
    return params
