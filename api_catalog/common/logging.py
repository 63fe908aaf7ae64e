"""Process-wide logging setup."""
from __future__ import annotations

import logging
import sys
from typing import Optional

_FORMAT = 'timestamp=%(asctime)s level=%(levelname)s logger=%(name)s message=%(message)s'

_handler: Optional[logging.Handler] = None


def configure_logging(level: str = 'WARNING') -> logging.Handler:
  """Install a single stderr handler on the root logger; repeated calls only adjust the level."""
  global _handler
  root = logging.getLogger()
  if _handler is None or _handler not in root.handlers:
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(_handler)
  root.setLevel(getattr(logging, level.upper(), logging.WARNING))
  return _handler
