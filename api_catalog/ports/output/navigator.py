"""Output port for navigation side effects."""
from __future__ import annotations

from typing import Protocol


class Navigator(Protocol):
  def navigate(self, path: str) -> None:
    """Leave the current view for the one mounted at `path`."""
    ...
