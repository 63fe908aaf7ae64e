"""View state for a single catalog interface and its endpoints."""
from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

from api_catalog.application.controllers.base import Controller
from api_catalog.application.controllers.messages import (
  DELETE_FAILED_MESSAGE,
  LOAD_FAILED_MESSAGE,
  NO_ID_MESSAGE,
  delete_confirmation,
)
from api_catalog.application.lifecycle import ControllerTornDown, LoadSequence
from api_catalog.application.routes import LIST_PATH, edit_path
from api_catalog.domain.entities.api_endpoint import ApiEndpoint
from api_catalog.domain.entities.api_interface import ApiInterface
from api_catalog.domain.value_objects.route_snapshot import RouteSnapshot
from api_catalog.ports.output.catalog_gateway import CatalogGateway, CatalogRequestError
from api_catalog.ports.output.navigator import Navigator
from api_catalog.ports.output.notifier import Notifier

logger = logging.getLogger(__name__)


class DetailController(Controller):
  def __init__(
    self,
    gateway: CatalogGateway,
    navigator: Navigator,
    notifier: Notifier,
    route: RouteSnapshot,
  ):
    super().__init__(gateway)
    self._navigator = navigator
    self._notifier = notifier
    self._route = route
    self._interface_loads = LoadSequence()
    self._endpoint_loads = LoadSequence()
    self.interface_id: Optional[int] = None
    self.interface: Optional[ApiInterface] = None
    self.endpoints: List[ApiEndpoint] = []
    self.is_loading = False
    self.error: Optional[str] = None

  async def activate(self) -> None:
    self.interface_id = self._route.int_param('id')
    if self.interface_id is None:
      self.error = NO_ID_MESSAGE
      return
    await asyncio.gather(
      self.load_interface(self.interface_id),
      self.load_endpoints(self.interface_id),
    )

  async def load_interface(self, interface_id: int) -> None:
    ticket = self._interface_loads.next()
    self.is_loading = True
    self.error = None
    try:
      interface = await self._call(self._gateway.get_interface(interface_id))
    except ControllerTornDown:
      return
    except CatalogRequestError as exc:
      if self._interface_loads.is_current(ticket):
        logger.error('Error loading API interface %s: %s', interface_id, exc.message)
        self.error = LOAD_FAILED_MESSAGE
        self.is_loading = False
      return

    if self._interface_loads.is_current(ticket):
      self.interface = interface
      self.is_loading = False

  async def load_endpoints(self, interface_id: int) -> None:
    """Endpoints are optional enrichment; failures are only logged."""
    ticket = self._endpoint_loads.next()
    try:
      endpoints = await self._call(self._gateway.list_endpoints(interface_id))
    except ControllerTornDown:
      return
    except CatalogRequestError as exc:
      logger.warning('Error loading endpoints for %s: %s', interface_id, exc.message)
      return

    if self._endpoint_loads.is_current(ticket):
      self.endpoints = list(endpoints)

  def edit(self) -> None:
    if self.interface is not None and self.interface.id is not None:
      self._navigator.navigate(edit_path(self.interface.id))

  async def delete(self) -> bool:
    if self.interface is None or self.interface.id is None:
      return False
    if not self._notifier.confirm(delete_confirmation(self.interface)):
      return False

    try:
      await self._call(self._gateway.delete_interface(self.interface.id))
    except ControllerTornDown:
      return False
    except CatalogRequestError as exc:
      logger.error('Error deleting API interface %s: %s', self.interface.id, exc.message)
      self._notifier.alert(DELETE_FAILED_MESSAGE)
      return False

    self._navigator.navigate(LIST_PATH)
    return True

  def back(self) -> None:
    self._navigator.navigate(LIST_PATH)
