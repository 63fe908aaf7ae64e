"""Requests-based catalog gateway implementation."""
from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Any, List, Mapping, Optional
from urllib.parse import quote

import requests

from api_catalog.domain.entities.api_endpoint import ApiEndpoint
from api_catalog.domain.entities.api_interface import ApiInterface
from api_catalog.ports.output.catalog_gateway import (
  CatalogGateway,
  CatalogRequestError,
  FailureKind,
)

logger = logging.getLogger(__name__)

INTERFACES_PATH = '/api/interfaces'


class BodyShape(Enum):
  """What a successful response body must decode to."""

  ANY = 'any'
  LIST = 'list'  # array of objects; an empty body counts as []
  OBJECT = 'object'
  OPTIONAL_OBJECT = 'optional-object'  # object, or an empty body


class RequestsCatalogGateway(CatalogGateway):
  """Talks to the catalog REST backend using the requests library.

  Blocking requests run in a worker thread so callers stay on the event loop.
  A cancelled caller stops waiting, but the request itself may still finish
  on the wire; its result is simply dropped.
  """

  def __init__(self, base_url: Optional[str] = '', timeout: Optional[float] = None):
    self._base_url = (base_url or '').rstrip('/')
    self._timeout = timeout

  async def list_interfaces(self) -> List[ApiInterface]:
    payload = await self._send('GET', INTERFACES_PATH, shape=BodyShape.LIST)
    return [ApiInterface.from_payload(item) for item in payload]

  async def get_interface(self, interface_id: int) -> ApiInterface:
    payload = await self._send('GET', f'{INTERFACES_PATH}/{interface_id}', shape=BodyShape.OBJECT)
    return ApiInterface.from_payload(payload)

  async def get_interface_by_name(self, name: str) -> ApiInterface:
    payload = await self._send(
      'GET', f'{INTERFACES_PATH}/name/{quote(name, safe="")}', shape=BodyShape.OBJECT
    )
    return ApiInterface.from_payload(payload)

  async def create_interface(self, data: ApiInterface) -> ApiInterface:
    payload = await self._send(
      'POST', INTERFACES_PATH, data.to_payload(), shape=BodyShape.OPTIONAL_OBJECT
    )
    return ApiInterface.from_payload(payload or {})

  async def update_interface(self, interface_id: int, data: ApiInterface) -> ApiInterface:
    payload = await self._send(
      'PUT', f'{INTERFACES_PATH}/{interface_id}', data.to_payload(), shape=BodyShape.OPTIONAL_OBJECT
    )
    return ApiInterface.from_payload(payload or {})

  async def delete_interface(self, interface_id: int) -> None:
    await self._send('DELETE', f'{INTERFACES_PATH}/{interface_id}')

  async def list_endpoints(self, interface_id: int) -> List[ApiEndpoint]:
    payload = await self._send(
      'GET', f'{INTERFACES_PATH}/{interface_id}/endpoints', shape=BodyShape.LIST
    )
    return [ApiEndpoint.from_payload(item) for item in payload]

  def url_for(self, path: str) -> str:
    """Prefix `path` with the configured base URL; an empty base leaves it as-is."""
    return f'{self._base_url}{path}' if self._base_url else path

  async def _send(
    self,
    method: str,
    path: str,
    json_payload: Optional[dict] = None,
    shape: BodyShape = BodyShape.ANY,
  ) -> Any:
    return await asyncio.to_thread(self._execute, method, self.url_for(path), json_payload, shape)

  def _execute(
    self, method: str, url: str, json_payload: Optional[dict], shape: BodyShape = BodyShape.ANY
  ) -> Any:
    try:
      response = requests.request(method, url, json=json_payload, timeout=self._timeout)
      response.raise_for_status()
    except requests.RequestException as e:
      raise self._normalize_error(e) from e

    if response.status_code == 204 or not response.content:
      body = None
    else:
      try:
        body = response.json()
      except ValueError as e:
        raise self._body_error(response, url, 'Invalid JSON body') from e

    return self._check_shape(body, shape, response, url)

  @classmethod
  def _check_shape(
    cls, body: Any, shape: BodyShape, response: requests.Response, url: str
  ) -> Any:
    if shape == BodyShape.LIST:
      if body is None:
        return []
      if isinstance(body, list) and all(isinstance(item, Mapping) for item in body):
        return body
      raise cls._body_error(response, url, 'Expected a JSON array of objects')
    if shape == BodyShape.OBJECT or (shape == BodyShape.OPTIONAL_OBJECT and body is not None):
      if isinstance(body, Mapping):
        return body
      raise cls._body_error(response, url, 'Expected a JSON object')
    return body

  @staticmethod
  def _body_error(response: requests.Response, url: str, problem: str) -> CatalogRequestError:
    error = CatalogRequestError(
      f'Error Code: {response.status_code}\nMessage: {problem} from {url}',
      kind=FailureKind.APPLICATION,
      status_code=response.status_code,
    )
    logger.error(error.message)
    return error

  @staticmethod
  def _normalize_error(error: requests.RequestException) -> CatalogRequestError:
    """Collapse transport and HTTP failures into one CatalogRequestError."""
    response = error.response
    if response is None:
      normalized = CatalogRequestError(f'Error: {error}', kind=FailureKind.TRANSPORT)
    else:
      status = response.status_code
      reason = response.reason or ''
      normalized = CatalogRequestError(
        f'Error Code: {status}\nMessage: Http failure response for {response.url}: {status} {reason}'.rstrip(),
        kind=FailureKind.APPLICATION,
        status_code=status,
      )
    logger.error(normalized.message)
    return normalized
