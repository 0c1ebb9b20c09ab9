"""Shared fixtures: a D4H client whose HTTP session is a mock."""

from unittest import mock

import pytest
import requests

from d4h_client import ClientConfig, D4HClient
from tests.fakes import BASE_URL, make_response


@pytest.fixture
def config():
    return ClientConfig(token="secret-token", base_url=BASE_URL, page_size=2)


@pytest.fixture
def session():
    fake = mock.Mock(spec=requests.Session)
    fake.request.return_value = make_response(200, {})
    return fake


@pytest.fixture
def client(config, session):
    return D4HClient(config, session=session)
