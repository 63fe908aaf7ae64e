"""Input port for rendering catalog views."""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Protocol

from api_catalog.domain.entities.api_endpoint import ApiEndpoint
from api_catalog.domain.entities.api_interface import ApiInterface


class CatalogPresenter(Protocol):
  def present_interfaces(self, interfaces: Sequence[ApiInterface]) -> Any:
    ...

  def present_interface(
    self, interface: ApiInterface, endpoint_count: Optional[int] = None
  ) -> Any:
    ...

  def present_endpoints(self, columns: Sequence[str], endpoints: Sequence[ApiEndpoint]) -> Any:
    ...

  def present_form_errors(self, errors: Dict[str, List[str]]) -> Any:
    ...

  def present_error(self, error: Exception) -> Any:
    ...
