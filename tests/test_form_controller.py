"""Tests for FormController: mode detection, loading, validation and saving."""
import asyncio

import pytest

from api_catalog.application.controllers.form_controller import FormController, is_edit_route
from api_catalog.application.routes import CREATE_PATH, detail_path, edit_path, match_route
from api_catalog.domain.value_objects.route_snapshot import RouteSnapshot
from tests.fakes.loop import settle


def _form(gateway, navigator, notifier, path):
  _, route = match_route(path)
  return FormController(gateway, navigator, notifier, route)


def _fill(controller, **values):
  defaults = {'name': 'Dog Facts', 'base_url': 'https://dogs.test'}
  defaults.update(values)
  controller.form.patch(defaults)


class TestMode:
  @pytest.mark.parametrize('route, expected', [
    (RouteSnapshot.from_path('/api-interfaces/5/edit', {'id': '5'}), True),
    (RouteSnapshot.from_path('/api-interfaces/5', {'id': '5'}), False),
    (RouteSnapshot.from_path('/api-interfaces/edit'), False),
    (RouteSnapshot.from_path('/api-interfaces/new'), False),
    (RouteSnapshot(), False),
  ])
  def test_is_edit_route(self, route, expected):
    assert is_edit_route(route) is expected

  @pytest.mark.asyncio
  async def test_create_route_starts_with_defaults(self, gateway, navigator, notifier):
    controller = _form(gateway, navigator, notifier, CREATE_PATH)
    await controller.activate()
    assert controller.is_edit_mode is False
    assert controller.form.value == {
      'name': '',
      'type': 'REST',
      'base_url': '',
      'description': '',
      'auth_type': 'NONE',
      'is_active': True,
    }
    assert gateway.network_calls == 0

  @pytest.mark.asyncio
  async def test_detail_shaped_route_is_not_edit_mode(self, gateway, navigator, notifier):
    controller = _form(gateway, navigator, notifier, detail_path(1))
    await controller.activate()
    assert controller.is_edit_mode is False
    assert gateway.network_calls == 0

  @pytest.mark.asyncio
  async def test_edit_route_with_non_numeric_id_redirects(self, gateway, navigator, notifier):
    controller = _form(gateway, navigator, notifier, '/api-interfaces/abc/edit')
    await controller.activate()
    assert notifier.alerts == ['Failed to load API interface. Redirecting...']
    assert navigator.paths == ['/api-interfaces']
    assert gateway.network_calls == 0


class TestLoad:
  @pytest.mark.asyncio
  async def test_edit_route_populates_form(self, gateway, navigator, notifier):
    controller = _form(gateway, navigator, notifier, edit_path(1))
    await controller.activate()
    assert controller.is_edit_mode is True
    assert controller.interface_id == 1
    assert controller.is_loading is False
    assert controller.form.value == {
      'name': 'Cat Facts',
      'type': 'REST',
      'base_url': 'https://catfact.ninja',
      'description': 'Random facts about cats',
      'auth_type': 'NONE',
      'is_active': True,
    }

  @pytest.mark.asyncio
  async def test_inactive_flag_and_missing_description_survive(self, gateway, navigator, notifier):
    controller = _form(gateway, navigator, notifier, edit_path(2))
    await controller.activate()
    assert controller.form['is_active'].value is False
    assert controller.form['description'].value == ''
    assert controller.form['auth_type'].value == 'API_KEY'

  @pytest.mark.asyncio
  async def test_load_failure_alerts_and_redirects(self, gateway, navigator, notifier):
    controller = _form(gateway, navigator, notifier, edit_path(99))
    await controller.activate()
    assert notifier.alerts == ['Failed to load API interface. Redirecting...']
    assert navigator.paths == ['/api-interfaces']
    assert controller.is_loading is False

  @pytest.mark.asyncio
  async def test_teardown_during_load_leaves_form_untouched(self, gateway, navigator, notifier):
    controller = _form(gateway, navigator, notifier, edit_path(1))
    gate = gateway.hold('get_interface')
    task = asyncio.ensure_future(controller.activate())
    await settle()

    controller.teardown()
    gate.set()
    await task

    assert controller.form['name'].value == ''
    assert navigator.paths == []
    assert notifier.alerts == []


class TestSubmit:
  @pytest.mark.asyncio
  async def test_invalid_form_never_reaches_the_network(self, gateway, navigator, notifier):
    controller = _form(gateway, navigator, notifier, CREATE_PATH)
    await controller.activate()
    controller.form.patch({'name': '', 'base_url': 'https://dogs.test'})

    assert await controller.submit() is False
    assert gateway.network_calls == 0
    assert navigator.paths == []
    assert all(f.touched for f in controller.form.fields.values())
    assert controller.form.errors() == {'name': ['required']}

  @pytest.mark.asyncio
  async def test_create_navigates_to_new_detail(self, gateway, navigator, notifier):
    controller = _form(gateway, navigator, notifier, CREATE_PATH)
    await controller.activate()
    _fill(controller, description='', auth_type='')

    assert await controller.submit() is True
    (name, (payload,)), = gateway.calls
    assert name == 'create_interface'
    assert payload.id is None
    assert payload.description is None
    assert payload.auth_type is None
    assert payload.is_active is True
    assert navigator.paths == ['/api-interfaces/3']
    assert controller.is_submitting is False

  @pytest.mark.asyncio
  async def test_edit_updates_by_route_id(self, gateway, navigator, notifier):
    controller = _form(gateway, navigator, notifier, edit_path(2))
    await controller.activate()
    controller.form.patch({'name': 'Weather v2'})

    assert await controller.submit() is True
    name, (interface_id, payload) = gateway.calls[-1]
    assert name == 'update_interface'
    assert interface_id == 2
    assert payload.id == 2
    assert payload.is_active is False
    assert gateway.interfaces[2].name == 'Weather v2'
    assert navigator.paths == ['/api-interfaces/2']

  @pytest.mark.asyncio
  async def test_failed_save_alerts_and_keeps_values(self, gateway, navigator, notifier):
    controller = _form(gateway, navigator, notifier, CREATE_PATH)
    await controller.activate()
    _fill(controller)
    gateway.fail('create_interface', status_code=None)

    assert await controller.submit() is False
    assert notifier.alerts == ['Failed to save API interface. Please try again.']
    assert controller.is_submitting is False
    assert controller.form['name'].value == 'Dog Facts'
    assert navigator.paths == []

  @pytest.mark.asyncio
  async def test_submit_while_submitting_is_ignored(self, gateway, navigator, notifier):
    controller = _form(gateway, navigator, notifier, CREATE_PATH)
    await controller.activate()
    _fill(controller)
    gate = gateway.hold('create_interface')
    first = asyncio.ensure_future(controller.submit())
    await settle()

    assert controller.is_submitting is True
    assert await controller.submit() is False

    gate.set()
    assert await first is True
    assert gateway.call_count('create_interface') == 1

  @pytest.mark.asyncio
  async def test_teardown_during_save_does_not_navigate(self, gateway, navigator, notifier):
    controller = _form(gateway, navigator, notifier, CREATE_PATH)
    await controller.activate()
    _fill(controller)
    gate = gateway.hold('create_interface')
    task = asyncio.ensure_future(controller.submit())
    await settle()

    controller.teardown()
    gate.set()
    assert await task is False
    assert navigator.paths == []


def test_cancel_returns_to_list(gateway, navigator, notifier):
  controller = _form(gateway, navigator, notifier, CREATE_PATH)
  controller.cancel()
  assert navigator.paths == ['/api-interfaces']
