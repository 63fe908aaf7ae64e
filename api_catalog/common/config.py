"""Application-level configuration utilities."""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_API_URL = 'http://localhost:8080'


@dataclass(frozen=True)
class Settings:
  """Immutable application settings loaded from environment variables."""

  api_base_url: str = DEFAULT_API_URL
  request_timeout: Optional[float] = None
  log_level: str = 'WARNING'


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
  if raw is None or not raw.strip():
    return None
  try:
    timeout = float(raw)
  except ValueError:
    raise ValueError(f'CATALOG_HTTP_TIMEOUT must be a number of seconds, got {raw!r}') from None
  if timeout <= 0:
    raise ValueError('CATALOG_HTTP_TIMEOUT must be positive when provided')
  return timeout


@lru_cache(maxsize=1)
def get_settings() -> Settings:
  """Load settings from environment variables once per process."""
  env_path = Path(__file__).resolve().parents[2] / '.env'
  if env_path.exists():
    load_dotenv(env_path)
  else:
    load_dotenv()

  from os import getenv

  # An empty prefix is meaningful: paths are then used as-is
  api_base_url = getenv('CATALOG_API_URL', DEFAULT_API_URL).rstrip('/')

  return Settings(
    api_base_url=api_base_url,
    request_timeout=_parse_timeout(getenv('CATALOG_HTTP_TIMEOUT')),
    log_level=(getenv('CATALOG_LOG_LEVEL') or 'WARNING').upper(),
  )
