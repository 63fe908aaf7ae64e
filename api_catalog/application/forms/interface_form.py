"""Form state for creating and editing catalog interfaces."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from api_catalog.domain.entities.api_interface import DEFAULT_AUTH_TYPE, DEFAULT_TYPE

Validator = Callable[[Any], Optional[str]]


def required(value: Any) -> Optional[str]:
  if value is None or (isinstance(value, str) and value == ''):
    return 'required'
  return None


def min_length(length: int) -> Validator:
  def validator(value: Any) -> Optional[str]:
    # Empty values are left to `required`
    if isinstance(value, str) and value and len(value) < length:
      return f'minlength:{length}'
    return None
  return validator


@dataclass
class FormField:
  value: Any
  validators: Tuple[Validator, ...] = ()
  touched: bool = False

  @property
  def errors(self) -> List[str]:
    return [error for error in (validate(self.value) for validate in self.validators) if error]

  @property
  def valid(self) -> bool:
    return not self.errors


def _default_fields() -> Dict[str, FormField]:
  return {
    'name': FormField('', (required, min_length(1))),
    'type': FormField(DEFAULT_TYPE, (required,)),
    'base_url': FormField('', (required,)),
    'description': FormField(''),
    'auth_type': FormField(DEFAULT_AUTH_TYPE),
    'is_active': FormField(True),
  }


@dataclass
class InterfaceForm:
  fields: Dict[str, FormField] = field(default_factory=_default_fields)

  def __getitem__(self, name: str) -> FormField:
    return self.fields[name]

  @property
  def value(self) -> Dict[str, Any]:
    return {name: form_field.value for name, form_field in self.fields.items()}

  @property
  def valid(self) -> bool:
    return all(form_field.valid for form_field in self.fields.values())

  @property
  def invalid(self) -> bool:
    return not self.valid

  def errors(self) -> Dict[str, List[str]]:
    return {name: f.errors for name, f in self.fields.items() if f.errors}

  def patch(self, values: Mapping[str, Any]) -> None:
    """Overwrite the given fields; unknown keys are ignored."""
    for name, value in values.items():
      if name in self.fields:
        self.fields[name].value = value

  def mark_all_touched(self) -> None:
    for form_field in self.fields.values():
      form_field.touched = True
