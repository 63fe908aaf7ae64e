"""Output port for blocking user notifications."""
from __future__ import annotations

from typing import Protocol


class Notifier(Protocol):
  def confirm(self, message: str) -> bool:
    """Ask the user a yes/no question and block until answered."""
    ...

  def alert(self, message: str) -> None:
    ...
