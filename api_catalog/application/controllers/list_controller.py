"""View state for browsing, searching and deleting catalog interfaces."""
from __future__ import annotations

import logging
from typing import List, Optional

from api_catalog.application.controllers.base import Controller
from api_catalog.application.controllers.messages import DELETE_FAILED_MESSAGE, delete_confirmation
from api_catalog.application.lifecycle import ControllerTornDown, LoadSequence
from api_catalog.application.routes import CREATE_PATH, detail_path, edit_path
from api_catalog.domain.entities.api_interface import ApiInterface
from api_catalog.ports.output.catalog_gateway import CatalogGateway, CatalogRequestError
from api_catalog.ports.output.navigator import Navigator
from api_catalog.ports.output.notifier import Notifier

logger = logging.getLogger(__name__)


def matches_term(interface: ApiInterface, term: str) -> bool:
  """Case-insensitive substring match on name, type and description."""
  return any(
    term in (value or '').lower()
    for value in (interface.name, interface.type, interface.description)
  )


class ListController(Controller):
  def __init__(self, gateway: CatalogGateway, navigator: Navigator, notifier: Notifier):
    super().__init__(gateway)
    self._navigator = navigator
    self._notifier = notifier
    self._loads = LoadSequence()
    self.interfaces: List[ApiInterface] = []
    self.filtered_interfaces: List[ApiInterface] = []
    self.search_term = ''
    self.is_loading = False

  async def activate(self) -> None:
    await self.load()

  async def load(self) -> None:
    """Reload every interface. Failures keep the previous (possibly empty) list."""
    ticket = self._loads.next()
    self.is_loading = True
    try:
      interfaces = await self._call(self._gateway.list_interfaces())
    except ControllerTornDown:
      logger.debug('List load finished after teardown; result dropped')
      return
    except CatalogRequestError as exc:
      if self._loads.is_current(ticket):
        logger.warning('Error loading API interfaces: %s', exc.message)
        self.is_loading = False
      return

    if not self._loads.is_current(ticket):
      logger.debug('Dropping stale list load #%s', ticket)
      return
    self.interfaces = list(interfaces)
    self.filtered_interfaces = list(interfaces)
    self.is_loading = False

  def filter(self) -> List[ApiInterface]:
    term = (self.search_term or '').strip()
    if not term:
      self.filtered_interfaces = list(self.interfaces)
    else:
      term = term.lower()
      self.filtered_interfaces = [api for api in self.interfaces if matches_term(api, term)]
    return self.filtered_interfaces

  def search(self, term: Optional[str]) -> List[ApiInterface]:
    self.search_term = term or ''
    return self.filter()

  async def request_delete(self, interface: ApiInterface) -> bool:
    """Delete after confirmation, then reload from the server.

    Returns True only when the delete went through.
    """
    if interface.id is None:
      return False
    if not self._notifier.confirm(delete_confirmation(interface)):
      return False

    try:
      await self._call(self._gateway.delete_interface(interface.id))
    except ControllerTornDown:
      return False
    except CatalogRequestError as exc:
      logger.error('Error deleting API interface %s: %s', interface.id, exc.message)
      self._notifier.alert(DELETE_FAILED_MESSAGE)
      return False

    await self.load()
    return True

  def go_to_detail(self, interface_id: Optional[int]) -> None:
    if interface_id is not None:
      self._navigator.navigate(detail_path(interface_id))

  def go_to_create(self) -> None:
    self._navigator.navigate(CREATE_PATH)

  def go_to_edit(self, interface_id: Optional[int]) -> None:
    if interface_id is not None:
      self._navigator.navigate(edit_path(interface_id))
