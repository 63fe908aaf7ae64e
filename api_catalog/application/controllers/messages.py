"""User-facing notification texts shared by the controllers."""
from __future__ import annotations

from api_catalog.domain.entities.api_interface import ApiInterface

DELETE_FAILED_MESSAGE = 'Failed to delete API interface. Please try again.'
FORM_LOAD_FAILED_MESSAGE = 'Failed to load API interface. Redirecting...'
SAVE_FAILED_MESSAGE = 'Failed to save API interface. Please try again.'
NO_ID_MESSAGE = 'No API ID provided'
LOAD_FAILED_MESSAGE = 'Failed to load API interface'


def delete_confirmation(interface: ApiInterface) -> str:
  return f'Are you sure you want to delete "{interface.name}"?'
