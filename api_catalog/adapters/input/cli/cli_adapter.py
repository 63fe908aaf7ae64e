"""CLI adapter driving the catalog controllers."""
from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List, Optional

import click

from api_catalog.application.controllers.detail_controller import DetailController
from api_catalog.application.controllers.endpoint_sublist_controller import (
  EndpointSublistController,
)
from api_catalog.application.controllers.form_controller import FormController
from api_catalog.application.controllers.list_controller import ListController
from api_catalog.application.routes import CREATE_PATH, View, detail_path, edit_path, match_route
from api_catalog.domain.value_objects.catalog_tags import AuthType, InterfaceType
from api_catalog.ports.input.catalog_presenter import CatalogPresenter
from api_catalog.ports.output.catalog_gateway import CatalogGateway, CatalogRequestError
from api_catalog.ports.output.navigator import Navigator
from api_catalog.ports.output.notifier import Notifier

GatewayFactory = Callable[[Optional[str]], CatalogGateway]


class ClickNotifier(Notifier):
  def __init__(self, assume_yes: bool = False):
    self._assume_yes = assume_yes
    self.alerts: List[str] = []

  def confirm(self, message: str) -> bool:
    if self._assume_yes:
      return True
    return click.confirm(message, default=False)

  def alert(self, message: str) -> None:
    self.alerts.append(message)
    click.echo(message, err=True)


class ShellNavigator(Navigator):
  """Records navigation requests so the shell can follow the last one."""

  def __init__(self) -> None:
    self.history: List[str] = []

  def navigate(self, path: str) -> None:
    self.history.append(path)

  @property
  def last(self) -> Optional[str]:
    return self.history[-1] if self.history else None


class CatalogShell:
  """One CLI invocation: owns the gateway, presenter and side-effect adapters."""

  def __init__(self, gateway: CatalogGateway, presenter: CatalogPresenter, assume_yes: bool = False):
    self.gateway = gateway
    self.presenter = presenter
    self.navigator = ShellNavigator()
    self.notifier = ClickNotifier(assume_yes=assume_yes)

  async def show_list(self, search: Optional[str] = None) -> None:
    controller = ListController(self.gateway, self.navigator, self.notifier)
    try:
      await controller.activate()
      rows = controller.search(search)
    finally:
      controller.teardown()
    click.echo(self.presenter.present_interfaces(rows))

  async def show_detail(self, path: str) -> None:
    _, route = match_route(path)
    detail = DetailController(self.gateway, self.navigator, self.notifier, route)
    try:
      await detail.activate()
      if detail.error or detail.interface is None:
        raise click.ClickException(detail.error or 'Failed to load API interface')
      sublist = EndpointSublistController(self.gateway, detail.interface_id)
      try:
        await sublist.activate()
      finally:
        sublist.teardown()
    finally:
      detail.teardown()

    click.echo(self.presenter.present_interface(detail.interface, len(detail.endpoints)))
    click.echo(self.presenter.present_endpoints(sublist.displayed_columns, sublist.endpoints))

  async def show_endpoints(self, interface_id: int) -> None:
    sublist = EndpointSublistController(self.gateway, interface_id)
    try:
      await sublist.activate()
    finally:
      sublist.teardown()
    click.echo(self.presenter.present_endpoints(sublist.displayed_columns, sublist.endpoints))

  async def show_by_name(self, name: str) -> None:
    try:
      interface = await self.gateway.get_interface_by_name(name)
    except CatalogRequestError as exc:
      click.echo(self.presenter.present_error(exc), err=True)
      raise click.exceptions.Exit(1) from exc
    click.echo(self.presenter.present_interface(interface))

  async def save(self, path: str, values: Dict[str, Any]) -> None:
    _, route = match_route(path)
    form = FormController(self.gateway, self.navigator, self.notifier, route)
    try:
      await form.activate()
      if self.navigator.last is not None:
        # load failed and the form redirected away
        raise click.exceptions.Exit(1)
      form.form.patch(values)
      saved = await form.submit()
    finally:
      form.teardown()

    if form.form.invalid:
      raise click.ClickException(self.presenter.present_form_errors(form.form.errors()))
    if not saved:
      raise click.exceptions.Exit(1)
    await self.follow()

  async def delete(self, interface_id: int) -> None:
    try:
      entry = await self.gateway.get_interface(interface_id)
    except CatalogRequestError as exc:
      if exc.not_found:
        raise click.ClickException(f'API interface {interface_id} not found') from exc
      click.echo(self.presenter.present_error(exc), err=True)
      raise click.exceptions.Exit(1) from exc

    controller = ListController(self.gateway, self.navigator, self.notifier)
    try:
      deleted = await controller.request_delete(entry)
    finally:
      controller.teardown()

    if self.notifier.alerts:
      raise click.exceptions.Exit(1)
    if not deleted:
      click.echo('Aborted.')
      return
    click.echo(self.presenter.present_interfaces(controller.filtered_interfaces))

  async def follow(self) -> None:
    """Render whatever view the last navigation pointed at."""
    path = self.navigator.last
    if path is None:
      return
    view, _ = match_route(path)
    if view == View.DETAIL:
      await self.show_detail(path)
    elif view == View.LIST:
      await self.show_list()


def _form_values(**options: Any) -> Dict[str, Any]:
  return {name: value for name, value in options.items() if value is not None}


class CLIAdapter:
  def __init__(self, gateway_factory: GatewayFactory, presenters: Dict[str, CatalogPresenter]):
    self._gateway_factory = gateway_factory
    self._presenters = presenters

  def build(self) -> click.Group:
    presenters = self._presenters
    gateway_factory = self._gateway_factory

    @click.group()
    @click.option('--api-url', default=None, help='Catalog backend base URL (overrides CATALOG_API_URL)')
    @click.option('--output', type=click.Choice(sorted(presenters)), default='text', show_default=True)
    @click.pass_context
    def cli(ctx: click.Context, api_url: Optional[str], output: str) -> None:
      """Browse and manage the API interface catalog."""
      ctx.obj = {'gateway': gateway_factory(api_url), 'presenter': presenters[output]}

    def shell(ctx: click.Context, assume_yes: bool = False) -> CatalogShell:
      return CatalogShell(ctx.obj['gateway'], ctx.obj['presenter'], assume_yes=assume_yes)

    @cli.command('list')
    @click.option('--search', default=None, help='Filter by name, type or description')
    @click.pass_context
    def list_interfaces(ctx: click.Context, search: Optional[str]) -> None:
      """List catalog interfaces."""
      asyncio.run(shell(ctx).show_list(search))

    @cli.command('show')
    @click.argument('interface_id', type=int, required=False)
    @click.option('--name', default=None, help='Look the interface up by name instead of id')
    @click.pass_context
    def show(ctx: click.Context, interface_id: Optional[int], name: Optional[str]) -> None:
      """Show one interface with its endpoints."""
      if name is not None:
        asyncio.run(shell(ctx).show_by_name(name))
      elif interface_id is not None:
        asyncio.run(shell(ctx).show_detail(detail_path(interface_id)))
      else:
        raise click.UsageError('Provide an INTERFACE_ID or --name')

    @cli.command('endpoints')
    @click.argument('interface_id', type=int)
    @click.pass_context
    def endpoints(ctx: click.Context, interface_id: int) -> None:
      """List the endpoints of one interface."""
      asyncio.run(shell(ctx).show_endpoints(interface_id))

    @cli.command('create')
    @click.option('--name', default='', help='Display name')
    @click.option('--type', 'api_type', default=InterfaceType.REST.value,
                  type=click.Choice([t.value for t in InterfaceType]), show_default=True)
    @click.option('--base-url', default='', help='Root URL all endpoints are relative to')
    @click.option('--description', default='')
    @click.option('--auth-type', default=AuthType.NONE.value,
                  type=click.Choice([a.value for a in AuthType]), show_default=True)
    @click.option('--active/--inactive', default=True, show_default=True)
    @click.pass_context
    def create(
      ctx: click.Context,
      name: str,
      api_type: str,
      base_url: str,
      description: str,
      auth_type: str,
      active: bool,
    ) -> None:
      """Create a new interface."""
      values = _form_values(
        name=name,
        type=api_type,
        base_url=base_url,
        description=description,
        auth_type=auth_type,
        is_active=active,
      )
      asyncio.run(shell(ctx).save(CREATE_PATH, values))

    @cli.command('edit')
    @click.argument('interface_id', type=int)
    @click.option('--name', default=None)
    @click.option('--type', 'api_type', default=None, type=click.Choice([t.value for t in InterfaceType]))
    @click.option('--base-url', default=None)
    @click.option('--description', default=None)
    @click.option('--auth-type', default=None, type=click.Choice([a.value for a in AuthType]))
    @click.option('--active/--inactive', default=None)
    @click.pass_context
    def edit(
      ctx: click.Context,
      interface_id: int,
      name: Optional[str],
      api_type: Optional[str],
      base_url: Optional[str],
      description: Optional[str],
      auth_type: Optional[str],
      active: Optional[bool],
    ) -> None:
      """Edit an interface; omitted options keep their stored values."""
      values = _form_values(
        name=name,
        type=api_type,
        base_url=base_url,
        description=description,
        auth_type=auth_type,
        is_active=active,
      )
      asyncio.run(shell(ctx).save(edit_path(interface_id), values))

    @cli.command('delete')
    @click.argument('interface_id', type=int)
    @click.option('--yes', is_flag=True, help='Do not ask for confirmation')
    @click.pass_context
    def delete(ctx: click.Context, interface_id: int, yes: bool) -> None:
      """Delete an interface (and, on the backend, its endpoints)."""
      asyncio.run(shell(ctx, assume_yes=yes).delete(interface_id))

    return cli

  def run(self) -> None:
    self.build()()
