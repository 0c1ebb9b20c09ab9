"""Authentication and request handling for the D4H API."""

import logging
from urllib.parse import quote

import requests
from pydantic import ValidationError
from tqdm import tqdm

from d4h_client.config.settings import ClientConfig
from d4h_client.core.errors import D4HRequestError
from d4h_client.models import Page

logger = logging.getLogger(__name__)


def redact_auth(headers):
    """Return a copy of headers with the Authorization value hidden."""
    redacted = dict(headers)
    for key in list(redacted.keys()):
        if key.lower() == 'authorization':
            redacted[key] = '***REDACTED***'
    return redacted


class AuthManager:
    """Base class for API authentication and request handling."""

    def __init__(self, config, session=None):
        """Initialize with a ClientConfig (or a bare API token) and an optional requests session."""
        if isinstance(config, str):
            config = ClientConfig(token=config)
        self.config = config
        self.base_url = config.base_url.rstrip('/')
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    @property
    def headers(self):
        """Default headers for API requests."""
        return {
            'Authorization': f'Bearer {self.config.token}',
            'Content-Type': 'application/json',
            'Accept': 'application/json'
        }

    def merge_headers(self, additional_headers=None):
        """Merge additional headers with default headers."""
        final_headers = self.headers.copy()
        if additional_headers:
            final_headers.update(additional_headers)
        return final_headers

    def build_url(self, *parts):
        """Join path segments onto the base URL, escaping each one."""
        return '/'.join([self.base_url] + [quote(str(part), safe='') for part in parts])

    def validate_response(self, response, expected_status_codes=None):
        """Validate API response.

        Any 2xx status is accepted unless ``expected_status_codes`` is given.

        Raises:
            D4HRequestError: if the status is not an expected one
        """
        if expected_status_codes is None:
            ok = 200 <= response.status_code < 300
        else:
            ok = response.status_code in expected_status_codes
        if ok:
            return True

        method = response.request.method if response.request is not None else None
        error_msg = f"Request failed with status {response.status_code}"
        if response.text:
            try:
                error_details = response.json()
                error_msg += f": {error_details}"
            except ValueError:
                error_msg += f": {response.text}"

        logger.error("%s %s: %s", method, response.url, error_msg)
        raise D4HRequestError(
            error_msg,
            method=method,
            url=response.url,
            status_code=response.status_code,
            body=response.text
        )

    def send_request(self, method, url, headers=None, expected_status_codes=None, **kwargs):
        """Send a request to the D4H API.

        Args:
            method (str): HTTP method (GET, PUT, etc.)
            url (str): The URL to send the request to
            headers (dict, optional): Additional headers to include
            expected_status_codes (list, optional): Status codes that count as success
            **kwargs: Additional arguments to pass to requests

        Returns:
            requests.Response: The response from the API

        Raises:
            D4HRequestError: on transport failure or an unexpected status
        """
        request_headers = self.merge_headers(headers)
        kwargs.setdefault('timeout', self.config.timeout)

        logger.debug("Sending %s request to %s params=%s headers=%s",
                     method, url, kwargs.get('params'), redact_auth(request_headers))
        if 'json' in kwargs:
            logger.debug("Payload: %s", kwargs['json'])

        try:
            response = self.session.request(method, url, headers=request_headers, **kwargs)
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise D4HRequestError(f"{method} {url} failed: {e}", method=method, url=url) from e

        self.validate_response(response, expected_status_codes)
        return response

    def decode_json(self, response):
        """Decode a response body, treating malformed JSON as a request error."""
        try:
            return response.json()
        except ValueError as e:
            raise D4HRequestError(
                f"Invalid JSON in response from {response.url}: {e}",
                url=response.url,
                status_code=response.status_code,
                body=response.text
            ) from e

    def parse_item(self, parse, data, url):
        """Parse one raw item, treating a schema mismatch as a request error."""
        try:
            return parse(data)
        except ValidationError as e:
            raise D4HRequestError(
                f"Unexpected item in response from {url}: {e}",
                method='GET',
                url=url,
                body=str(data)
            ) from e

    def get_json(self, url, params=None):
        """GET a single resource and return the decoded body."""
        response = self.send_request('GET', url, params=params or None)
        return self.decode_json(response)

    def handle_paginated_response(self, url, headers=None, params=None, show_progress=False):
        """Handle paginated API responses.

        Args:
            url (str): Base URL for the request
            headers (dict, optional): Additional headers to include
            params (dict, optional): Query parameters to include
            show_progress (bool): Display a progress bar while fetching

        Returns:
            list: Combined results from all pages, in server order
        """
        all_items = []
        page_size = self.config.page_size
        page_number = 0

        with tqdm(desc="Fetching", unit="item", disable=not show_progress) as pbar:
            while True:
                query_params = dict(params) if params else {}
                query_params['page'] = str(page_number)
                query_params['size'] = str(page_size)

                response = self.send_request('GET', url, headers=headers, params=query_params)
                payload = self.decode_json(response)

                # Some endpoints return a bare list instead of a page envelope
                if isinstance(payload, list):
                    all_items.extend(payload)
                    pbar.update(len(payload))
                    break

                try:
                    page = Page.model_validate(payload)
                except ValidationError as e:
                    raise D4HRequestError(
                        f"Unexpected list response from {url}: {e}",
                        method='GET',
                        url=url,
                        status_code=response.status_code,
                        body=response.text
                    ) from e

                if page.total_size is not None and pbar.total != page.total_size:
                    pbar.total = page.total_size
                    pbar.refresh()

                all_items.extend(page.results)
                pbar.update(len(page.results))

                # The server may cap a page below the requested size, so only
                # fall back to the short page test when totalSize is missing
                if page.total_size is not None:
                    if len(all_items) >= page.total_size or not page.results:
                        break
                elif len(page.results) < (page.page_size or page_size):
                    break
                page_number += 1

        logger.debug("Fetched %d items from %s in %d page(s)", len(all_items), url, page_number + 1)
        return all_items
