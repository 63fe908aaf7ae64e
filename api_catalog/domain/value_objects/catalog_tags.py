"""Known tag vocabularies for catalog entries."""
from __future__ import annotations

from enum import Enum


class InterfaceType(str, Enum):
  REST = 'REST'
  SOAP = 'SOAP'
  GRAPHQL = 'GraphQL'
  GRPC = 'gRPC'


class AuthType(str, Enum):
  """Authentication scheme tags; NONE is the default sentinel."""
  NONE = 'NONE'
  API_KEY = 'API_KEY'
  BEARER = 'BEARER'
  BASIC = 'BASIC'
  OAUTH2 = 'OAUTH2'
