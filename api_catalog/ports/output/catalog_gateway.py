"""Output port for the catalog backend."""
from __future__ import annotations

from enum import Enum
from typing import List, Optional, Protocol

from api_catalog.domain.entities.api_endpoint import ApiEndpoint
from api_catalog.domain.entities.api_interface import ApiInterface


class CatalogGateway(Protocol):
  """Sole component allowed to talk to the catalog backend.

  Every operation either returns its value or raises exactly one
  CatalogRequestError. Implementations hold no state between calls:
  no retries, no caching.
  """

  async def list_interfaces(self) -> List[ApiInterface]:
    ...

  async def get_interface(self, interface_id: int) -> ApiInterface:
    """Fetch one interface; a non-2xx status (404 included) raises CatalogRequestError."""
    ...

  async def get_interface_by_name(self, name: str) -> ApiInterface:
    ...

  async def create_interface(self, data: ApiInterface) -> ApiInterface:
    """Persist a new interface and return it with its server-assigned id."""
    ...

  async def update_interface(self, interface_id: int, data: ApiInterface) -> ApiInterface:
    """Full replace: every field of `data` overwrites the stored interface."""
    ...

  async def delete_interface(self, interface_id: int) -> None:
    ...

  async def list_endpoints(self, interface_id: int) -> List[ApiEndpoint]:
    ...


class FailureKind(str, Enum):
  TRANSPORT = 'transport'
  APPLICATION = 'application'


class CatalogRequestError(Exception):
  """Normalized failure for any gateway operation.

  Callers are only expected to read `message`; `kind` and `status_code`
  are kept for diagnostics.
  """

  def __init__(
    self,
    message: str,
    kind: FailureKind = FailureKind.APPLICATION,
    status_code: Optional[int] = None,
  ):
    super().__init__(message)
    self.message = message
    self.kind = kind
    self.status_code = status_code

  @property
  def not_found(self) -> bool:
    return self.status_code == 404
