"""View state for the create/edit interface form."""
from __future__ import annotations

import logging
from typing import Optional

from api_catalog.application.controllers.base import Controller
from api_catalog.application.controllers.messages import (
  FORM_LOAD_FAILED_MESSAGE,
  SAVE_FAILED_MESSAGE,
)
from api_catalog.application.forms.interface_form import InterfaceForm
from api_catalog.application.lifecycle import ControllerTornDown
from api_catalog.application.routes import LIST_PATH, detail_path
from api_catalog.domain.entities.api_interface import (
  DEFAULT_AUTH_TYPE,
  DEFAULT_TYPE,
  ApiInterface,
)
from api_catalog.domain.value_objects.route_snapshot import RouteSnapshot
from api_catalog.ports.output.catalog_gateway import CatalogGateway, CatalogRequestError
from api_catalog.ports.output.navigator import Navigator
from api_catalog.ports.output.notifier import Notifier

logger = logging.getLogger(__name__)

EDIT_SEGMENT = 'edit'


def is_edit_route(route: RouteSnapshot) -> bool:
  """Edit mode needs both an id and an explicit 'edit' segment.

  A bare id path belongs to the detail view and must not open the form
  in edit mode.
  """
  return route.param('id') is not None and route.has_segment(EDIT_SEGMENT)


class FormController(Controller):
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
    self.form = InterfaceForm()
    self.is_edit_mode = False
    self.interface_id: Optional[int] = None
    self.is_loading = False
    self.is_submitting = False

  async def activate(self) -> None:
    self.form = InterfaceForm()
    if is_edit_route(self._route):
      self.is_edit_mode = True
      self.interface_id = self._route.int_param('id')
      if self.interface_id is None:
        logger.error('Edit route carries a non-numeric id: %r', self._route.param('id'))
        self._notifier.alert(FORM_LOAD_FAILED_MESSAGE)
        self._navigator.navigate(LIST_PATH)
        return
      await self.load(self.interface_id)
    else:
      self.is_edit_mode = False

  async def load(self, interface_id: int) -> None:
    self.is_loading = True
    try:
      api = await self._call(self._gateway.get_interface(interface_id))
    except ControllerTornDown:
      return
    except CatalogRequestError as exc:
      logger.error('Error loading API interface %s: %s', interface_id, exc.message)
      self.is_loading = False
      self._notifier.alert(FORM_LOAD_FAILED_MESSAGE)
      self._navigator.navigate(LIST_PATH)
      return

    self.form.patch({
      'name': api.name or '',
      'type': api.type or DEFAULT_TYPE,
      'base_url': api.base_url or '',
      'description': api.description or '',
      'auth_type': api.auth_type or DEFAULT_AUTH_TYPE,
      # an explicit False from the server must survive
      'is_active': api.is_active if api.is_active is not None else True,
    })
    self.is_loading = False

  def build_payload(self) -> ApiInterface:
    value = self.form.value
    is_active = value.get('is_active')
    return ApiInterface(
      id=self.interface_id if self.is_edit_mode else None,
      name=value.get('name'),
      type=value.get('type'),
      base_url=value.get('base_url'),
      description=value.get('description') or None,
      auth_type=value.get('auth_type') or None,
      is_active=is_active if is_active is not None else True,
    )

  async def submit(self) -> bool:
    """Validate, then create or update. Returns True once the save succeeded."""
    if self.is_submitting:
      return False
    if self.form.invalid:
      self.form.mark_all_touched()
      return False

    self.is_submitting = True
    payload = self.build_payload()
    if self.is_edit_mode and self.interface_id is not None:
      request = self._gateway.update_interface(self.interface_id, payload)
    else:
      request = self._gateway.create_interface(payload)

    try:
      saved = await self._call(request)
    except ControllerTornDown:
      return False
    except CatalogRequestError as exc:
      logger.error('Error saving API interface: %s', exc.message)
      self.is_submitting = False
      self._notifier.alert(SAVE_FAILED_MESSAGE)
      return False

    self.is_submitting = False
    if saved.id is not None:
      self._navigator.navigate(detail_path(saved.id))
    else:
      self._navigator.navigate(LIST_PATH)
    return True

  def cancel(self) -> None:
    self._navigator.navigate(LIST_PATH)
