"""Plain text presenter for terminal output."""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from api_catalog.adapters.presentation.columns import endpoint_cell
from api_catalog.domain.entities.api_endpoint import ApiEndpoint
from api_catalog.domain.entities.api_interface import ApiInterface
from api_catalog.ports.input.catalog_presenter import CatalogPresenter


def _table(headers: Sequence[str], rows: List[List[str]]) -> List[str]:
  widths = [len(header) for header in headers]
  for row in rows:
    widths = [max(width, len(cell)) for width, cell in zip(widths, row)]

  def line(cells: Sequence[str]) -> str:
    return '  '.join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

  return [line(headers), line(['-' * width for width in widths])] + [line(row) for row in rows]


class TextPresenter(CatalogPresenter):
  def present_interfaces(self, interfaces: Sequence[ApiInterface]) -> str:
    if not interfaces:
      return '(no API interfaces)'
    rows = [
      [
        str(api.id if api.id is not None else '-'),
        api.name or '',
        api.type or '',
        api.base_url or '',
        'yes' if api.is_active is not False else 'no',
      ]
      for api in interfaces
    ]
    return '\n'.join(_table(['ID', 'NAME', 'TYPE', 'BASE URL', 'ACTIVE'], rows))

  def present_interface(
    self, interface: ApiInterface, endpoint_count: Optional[int] = None
  ) -> str:
    lines = [
      '=' * 60,
      interface.label(),
      '=' * 60,
      f'- id: {interface.id}',
      f'- type: {interface.type or ""}',
      f'- base url: {interface.base_url or ""}',
      f'- auth: {interface.auth_type or "NONE"}',
      f'- active: {"yes" if interface.is_active is not False else "no"}',
    ]
    if interface.description:
      lines.append(f'- description: {interface.description}')
    if interface.created_at:
      lines.append(f'- created: {interface.created_at}')
    if interface.updated_at:
      lines.append(f'- updated: {interface.updated_at}')
    if endpoint_count is not None:
      lines.append(f'- endpoints: {endpoint_count}')
    return '\n'.join(lines)

  def present_endpoints(self, columns: Sequence[str], endpoints: Sequence[ApiEndpoint]) -> str:
    if not endpoints:
      return '(no endpoints)'
    rows = [[endpoint_cell(endpoint, column) for column in columns] for endpoint in endpoints]
    return '\n'.join(_table([column.upper() for column in columns], rows))

  def present_form_errors(self, errors: Dict[str, List[str]]) -> str:
    lines = ['Invalid form:']
    for name, field_errors in errors.items():
      lines.append(f'- {name}: {", ".join(field_errors)}')
    return '\n'.join(lines)

  def present_error(self, error: Exception) -> str:
    return f'ERROR: {error}'
