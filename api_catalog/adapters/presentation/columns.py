"""Cell values for the endpoint table columns."""
from __future__ import annotations

from typing import Callable, Dict

from api_catalog.domain.entities.api_endpoint import ApiEndpoint


def endpoint_status(endpoint: ApiEndpoint) -> str:
  return 'Inactive' if endpoint.is_active is False else 'Active'


ENDPOINT_CELLS: Dict[str, Callable[[ApiEndpoint], str]] = {
  'method': lambda endpoint: (endpoint.http_method or '').upper(),
  'path': lambda endpoint: endpoint.path or '',
  'description': lambda endpoint: endpoint.description or '',
  'status': endpoint_status,
}


def endpoint_cell(endpoint: ApiEndpoint, column: str) -> str:
  return ENDPOINT_CELLS[column](endpoint)
