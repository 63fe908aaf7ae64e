"""Catalog view paths and the route table that resolves them."""
from __future__ import annotations

import re
from enum import Enum
from typing import Tuple, Union

from api_catalog.domain.value_objects.route_snapshot import RouteSnapshot

LIST_PATH = '/api-interfaces'
CREATE_PATH = '/api-interfaces/new'


class View(str, Enum):
  LIST = 'list'
  CREATE = 'create'
  DETAIL = 'detail'
  EDIT = 'edit'


def detail_path(interface_id: Union[int, str]) -> str:
  return f'{LIST_PATH}/{interface_id}'


def edit_path(interface_id: Union[int, str]) -> str:
  return f'{LIST_PATH}/{interface_id}/edit'


# Order matters: 'new' must win over the ':id' pattern.
_ROUTES = (
  (re.compile(r'^/?$'), View.LIST),
  (re.compile(r'^/api-interfaces/?$'), View.LIST),
  (re.compile(r'^/api-interfaces/new/?$'), View.CREATE),
  (re.compile(r'^/api-interfaces/(?P<id>[^/]+)/?$'), View.DETAIL),
  (re.compile(r'^/api-interfaces/(?P<id>[^/]+)/edit/?$'), View.EDIT),
)


def match_route(path: str) -> Tuple[View, RouteSnapshot]:
  """Resolve a path to its view; anything unknown falls back to the list."""
  for pattern, view in _ROUTES:
    match = pattern.match(path)
    if match:
      return view, RouteSnapshot.from_path(path, match.groupdict())
  return View.LIST, RouteSnapshot.from_path(LIST_PATH)
