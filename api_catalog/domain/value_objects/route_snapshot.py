"""Value object describing the navigation context a view was opened with."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class RouteSnapshot:
  """Path segments plus named parameters extracted from them."""

  segments: Tuple[str, ...] = ()
  params: Dict[str, str] = field(default_factory=dict)

  @classmethod
  def from_path(cls, path: str, params: Optional[Dict[str, str]] = None) -> 'RouteSnapshot':
    segments = tuple(part for part in path.split('/') if part)
    return cls(segments=segments, params=dict(params or {}))

  def param(self, name: str) -> Optional[str]:
    value = self.params.get(name)
    return value if value else None

  def int_param(self, name: str) -> Optional[int]:
    """Integer parameter, or None when missing or not an integer."""
    value = self.param(name)
    if value is None:
      return None
    try:
      return int(value, 10)
    except ValueError:
      return None

  def has_segment(self, segment: str) -> bool:
    return segment in self.segments
