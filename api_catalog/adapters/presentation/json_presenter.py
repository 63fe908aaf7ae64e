"""JSON presenter implementation."""
from __future__ import annotations

import json
from typing import Dict, List, Optional, Sequence

from api_catalog.adapters.presentation.columns import endpoint_cell
from api_catalog.domain.entities.api_endpoint import ApiEndpoint
from api_catalog.domain.entities.api_interface import ApiInterface
from api_catalog.ports.input.catalog_presenter import CatalogPresenter


def _dump(payload: object) -> str:
  return json.dumps(payload, ensure_ascii=False, indent=2)


class JsonPresenter(CatalogPresenter):
  def present_interfaces(self, interfaces: Sequence[ApiInterface]) -> str:
    return _dump([api.to_dict() for api in interfaces])

  def present_interface(
    self, interface: ApiInterface, endpoint_count: Optional[int] = None
  ) -> str:
    payload = interface.to_dict()
    if endpoint_count is not None:
      payload['endpoint_count'] = endpoint_count
    return _dump(payload)

  def present_endpoints(self, columns: Sequence[str], endpoints: Sequence[ApiEndpoint]) -> str:
    return _dump([
      {column: endpoint_cell(endpoint, column) for column in columns}
      for endpoint in endpoints
    ])

  def present_form_errors(self, errors: Dict[str, List[str]]) -> str:
    return _dump({'status': 'invalid', 'errors': errors})

  def present_error(self, error: Exception) -> str:
    return _dump({'status': 'error', 'error': str(error)})
