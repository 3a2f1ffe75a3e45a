'''Shared fixtures'''
import json
import os
from typing import Any, Dict, Generator

import pytest
import requests_mock

from catalog.client import CatalogClient

DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'data')
READ_ENTITY_DATA_DIR = os.path.join(DATA_DIR, 'handlers', 'ReadEntity')


def _load(path: str) -> Any:
    with open(path) as f:
        return json.load(f)


@pytest.fixture()
def mock_endpoint() -> str:
    '''Return a mock catalog base URL'''
    return 'https://backstage.example.com'


@pytest.fixture()
def requests_mocker() -> Generator[requests_mock.Mocker, None, None]:
    '''Yield an active requests mock'''
    # NOTE: Use as a decerator with Python 3 appears broken so use fixture.
    # ref. https://github.com/pytest-dev/pytest/issues/2749
    with requests_mock.Mocker() as m:
        yield m


@pytest.fixture()
def mock_client(mock_endpoint: str) -> CatalogClient:
    '''Return a catalog client for the mock endpoint'''
    return CatalogClient(mock_endpoint, timeout=1)


@pytest.fixture()
def mock_entity() -> Dict[str, Any]:
    '''Return a Group entity as served by the catalog'''
    return _load(os.path.join(READ_ENTITY_DATA_DIR, 'data.json'))


@pytest.fixture()
def mock_fallback() -> Dict[str, Any]:
    '''Return a Group fallback as configured by a user'''
    return _load(os.path.join(READ_ENTITY_DATA_DIR, 'fallback.json'))


@pytest.fixture()
def group_url(mock_endpoint: str) -> str:
    return '{}/api/catalog/entities/by-name/group/example-namespace/example-group'.format(mock_endpoint)
