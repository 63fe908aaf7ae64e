"""Endpoint table embedded in a parent view."""
from __future__ import annotations

import logging
from typing import List, Optional

from api_catalog.application.controllers.base import Controller
from api_catalog.application.lifecycle import ControllerTornDown, LoadSequence
from api_catalog.domain.entities.api_endpoint import ApiEndpoint
from api_catalog.ports.output.catalog_gateway import CatalogGateway, CatalogRequestError

logger = logging.getLogger(__name__)

DISPLAYED_COLUMNS = ('method', 'path', 'description', 'status')


class EndpointSublistController(Controller):
  """Loads the endpoints of the interface id handed in by the parent view."""

  displayed_columns = DISPLAYED_COLUMNS

  def __init__(self, gateway: CatalogGateway, interface_id: Optional[int] = None):
    super().__init__(gateway)
    self.interface_id = interface_id
    self.endpoints: List[ApiEndpoint] = []
    self.is_loading = False
    self._loads = LoadSequence()

  async def activate(self) -> None:
    if self.interface_id is not None:
      await self.load()

  async def load(self) -> None:
    if self.interface_id is None:
      return
    ticket = self._loads.next()
    self.is_loading = True
    try:
      endpoints = await self._call(self._gateway.list_endpoints(self.interface_id))
    except ControllerTornDown:
      return
    except CatalogRequestError as exc:
      if self._loads.is_current(ticket):
        logger.warning('Error loading endpoints: %s', exc.message)
        self.is_loading = False
      return

    if self._loads.is_current(ticket):
      self.endpoints = list(endpoints)
      self.is_loading = False
