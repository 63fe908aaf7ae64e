"""Domain entity for an endpoint exposed by a cataloged API."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class ApiEndpoint:
  """One HTTP method + path pair owned by exactly one interface."""

  http_method: Optional[str]
  path: Optional[str]
  id: Optional[int] = None
  parent_id: Optional[int] = None
  description: Optional[str] = None
  request_example: Optional[str] = None
  response_example: Optional[str] = None
  is_active: Optional[bool] = None
  created_at: Optional[str] = None
  updated_at: Optional[str] = None

  @classmethod
  def from_payload(cls, payload: Mapping[str, Any]) -> 'ApiEndpoint':
    parent = payload.get('apiInterface')
    # The backend may embed the owning interface instead of its id
    if isinstance(parent, Mapping):
      parent = parent.get('id')

    return cls(
      id=payload.get('id'),
      parent_id=parent,
      http_method=payload.get('httpMethod'),
      path=payload.get('path'),
      description=payload.get('description'),
      request_example=payload.get('requestExample'),
      response_example=payload.get('responseExample'),
      is_active=payload.get('isActive'),
      created_at=payload.get('createdAt'),
      updated_at=payload.get('updatedAt'),
    )

  def to_dict(self) -> Dict[str, Any]:
    return {
      'id': self.id,
      'apiInterface': self.parent_id,
      'httpMethod': self.http_method,
      'path': self.path,
      'description': self.description,
      'requestExample': self.request_example,
      'responseExample': self.response_example,
      'isActive': self.is_active,
      'createdAt': self.created_at,
      'updatedAt': self.updated_at,
    }
