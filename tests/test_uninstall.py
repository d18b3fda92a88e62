"""Tests for the hide_login_uninstall management command."""

from io import StringIO

import pytest
from django.core.management import call_command

from apps.hide_login.configuration import get_configuration_provider
from apps.hide_login.models import LoginOption

pytestmark = pytest.mark.django_db


def test__uninstall__deletes_options_and_restores_defaults() -> None:
    provider = get_configuration_provider()
    provider.save('door', 'away')
    assert provider.load().login_slug == 'door'

    out = StringIO()
    call_command('hide_login_uninstall', stdout=out)

    assert 'Removed 2 hide login option(s)' in out.getvalue()
    assert not LoginOption.objects.exists()
    assert provider.load().login_slug == 'signin'


def test__uninstall__without_options__is_a_noop() -> None:
    out = StringIO()
    call_command('hide_login_uninstall', stdout=out)

    assert 'Removed 0 hide login option(s)' in out.getvalue()
