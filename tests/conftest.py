"""Pytest configuration and fixtures."""
from unittest.mock import patch

import pytest

from api_catalog.adapters.output.api.requests_catalog_gateway import RequestsCatalogGateway
from api_catalog.domain.entities.api_endpoint import ApiEndpoint
from api_catalog.domain.entities.api_interface import ApiInterface
from tests.fakes.catalog_backend import InMemoryCatalogBackend
from tests.fakes.catalog_gateway import FakeCatalogGateway
from tests.fakes.ui import RecordingNavigator, ScriptedNotifier

BASE_URL = 'http://catalog.test'


@pytest.fixture
def cat_facts() -> ApiInterface:
  return ApiInterface(
    id=1,
    name='Cat Facts',
    type='REST',
    base_url='https://catfact.ninja',
    description='Random facts about cats',
  )


@pytest.fixture
def weather() -> ApiInterface:
  return ApiInterface(
    id=2,
    name='Weather',
    type='REST',
    base_url='https://api.weather.test',
    description=None,
    auth_type='API_KEY',
    is_active=False,
  )


@pytest.fixture
def cat_endpoints() -> list:
  return [
    ApiEndpoint(id=10, parent_id=1, http_method='GET', path='/fact', description='One fact'),
    ApiEndpoint(id=11, parent_id=1, http_method='GET', path='/facts', is_active=False),
  ]


@pytest.fixture
def gateway(cat_facts, weather, cat_endpoints) -> FakeCatalogGateway:
  return FakeCatalogGateway([cat_facts, weather], {1: cat_endpoints})


@pytest.fixture
def navigator() -> RecordingNavigator:
  return RecordingNavigator()


@pytest.fixture
def notifier() -> ScriptedNotifier:
  return ScriptedNotifier(answer=True)


@pytest.fixture
def backend():
  fake = InMemoryCatalogBackend()
  with patch(
    'api_catalog.adapters.output.api.requests_catalog_gateway.requests.request',
    side_effect=fake,
  ) as mocked:
    fake.mock = mocked
    yield fake


@pytest.fixture
def http_gateway(backend) -> RequestsCatalogGateway:
  return RequestsCatalogGateway(base_url=BASE_URL)
