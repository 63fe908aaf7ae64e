"""Catalog entry describing a remote API."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from api_catalog.domain.entities.api_endpoint import ApiEndpoint


DEFAULT_TYPE = 'REST'
DEFAULT_AUTH_TYPE = 'NONE'


@dataclass(frozen=True)
class ApiInterface:
  """An external API definition; `id` stays None until the backend persists it."""

  name: Optional[str]
  type: Optional[str]
  base_url: Optional[str]
  description: Optional[str] = None
  auth_type: Optional[str] = DEFAULT_AUTH_TYPE
  is_active: Optional[bool] = True
  id: Optional[int] = None
  created_at: Optional[str] = None
  updated_at: Optional[str] = None
  endpoints: Optional[List[ApiEndpoint]] = field(default=None, compare=False)

  @classmethod
  def from_payload(cls, payload: Mapping[str, Any]) -> 'ApiInterface':
    embedded = payload.get('endpoints')
    endpoints = None
    if isinstance(embedded, list):
      endpoints = [ApiEndpoint.from_payload(item) for item in embedded if isinstance(item, Mapping)]

    return cls(
      id=payload.get('id'),
      name=payload.get('name'),
      type=payload.get('type'),
      base_url=payload.get('base_url'),
      description=payload.get('description'),
      auth_type=payload.get('auth_type'),
      is_active=payload.get('is_active'),
      created_at=payload.get('created_at'),
      updated_at=payload.get('updated_at'),
      endpoints=endpoints,
    )

  def to_payload(self) -> Dict[str, Any]:
    """Write payload; server-assigned timestamps and embedded endpoints are never sent."""
    return {
      'id': self.id,
      'name': self.name,
      'type': self.type,
      'base_url': self.base_url,
      'description': self.description,
      'auth_type': self.auth_type,
      'is_active': self.is_active,
    }

  def to_dict(self) -> Dict[str, Any]:
    data = self.to_payload()
    data['created_at'] = self.created_at
    data['updated_at'] = self.updated_at
    if self.endpoints is not None:
      data['endpoints'] = [endpoint.to_dict() for endpoint in self.endpoints]
    return data

  def label(self) -> str:
    return self.name or f'#{self.id}'
