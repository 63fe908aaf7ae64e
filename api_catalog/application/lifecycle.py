"""Controller lifecycle primitives: teardown signal and load sequencing."""
from __future__ import annotations

import asyncio
import inspect
from typing import Awaitable, Set, TypeVar

T = TypeVar('T')


class ControllerTornDown(Exception):
  """The owning controller was torn down before the result could be applied."""


class Teardown:
  """Cancellation token shared by every call a controller instance starts.

  Results (success or failure) that arrive after `fire()` are turned into
  ControllerTornDown so they never reach controller state.
  """

  def __init__(self) -> None:
    self._fired = False
    self._pending: Set[asyncio.Future] = set()

  @property
  def fired(self) -> bool:
    return self._fired

  def fire(self) -> None:
    if self._fired:
      return
    self._fired = True
    for task in list(self._pending):
      task.cancel()

  async def run(self, awaitable: Awaitable[T]) -> T:
    if self._fired:
      if inspect.iscoroutine(awaitable):
        awaitable.close()
      raise ControllerTornDown()

    task = asyncio.ensure_future(awaitable)
    self._pending.add(task)
    try:
      result = await task
    except asyncio.CancelledError:
      if self._fired and task.cancelled():
        raise ControllerTornDown() from None
      raise
    except Exception:
      if self._fired:
        raise ControllerTornDown() from None
      raise
    finally:
      self._pending.discard(task)

    if self._fired:
      raise ControllerTornDown()
    return result


class LoadSequence:
  """Generation counter so only the most recently issued load may apply its result."""

  def __init__(self) -> None:
    self._issued = 0

  def next(self) -> int:
    self._issued += 1
    return self._issued

  def is_current(self, ticket: int) -> bool:
    return ticket == self._issued
