"""Simple dependency wiring helpers."""
from __future__ import annotations

from typing import Optional

from api_catalog.adapters.output.api.requests_catalog_gateway import RequestsCatalogGateway
from api_catalog.common.config import Settings, get_settings
from api_catalog.ports.output.catalog_gateway import CatalogGateway


def create_gateway(
  settings: Optional[Settings] = None, api_url: Optional[str] = None
) -> CatalogGateway:
  settings = settings or get_settings()
  base_url = settings.api_base_url if api_url is None else api_url
  return RequestsCatalogGateway(base_url=base_url, timeout=settings.request_timeout)
