"""Shared lifecycle plumbing for view-state controllers."""
from __future__ import annotations

from typing import Awaitable, TypeVar

from api_catalog.application.lifecycle import Teardown
from api_catalog.ports.output.catalog_gateway import CatalogGateway

T = TypeVar('T')


class Controller:
  """Owns a gateway handle and the teardown signal for one view instance."""

  def __init__(self, gateway: CatalogGateway):
    self._gateway = gateway
    self._teardown = Teardown()

  async def activate(self) -> None:
    """Called once when the view is mounted."""

  def teardown(self) -> None:
    """Stop every in-flight call; their results will never touch this controller."""
    self._teardown.fire()

  @property
  def torn_down(self) -> bool:
    return self._teardown.fired

  async def _call(self, awaitable: Awaitable[T]) -> T:
    return await self._teardown.run(awaitable)
