import logging
import threading

import pytest
from django.core.management import call_command
from django.db import OperationalError
from django.urls import reverse
from rest_framework.test import APIClient

from care.services import dbhealth

pytestmark = pytest.mark.django_db


def test_check_once_succeeds():
    monitor = dbhealth.DatabaseHealthMonitor(interval=120, retry=5)
    assert monitor.check_once() is True
    assert monitor.next_delay() == 120


def test_failed_check_is_logged_and_retried_sooner(monkeypatch, caplog):
    def broken(alias='default'):
        raise OperationalError('connection refused')

    monkeypatch.setattr(dbhealth, 'check_database', broken)
    monkeypatch.setattr(logging.getLogger('care'), 'propagate', True)
    monitor = dbhealth.DatabaseHealthMonitor(interval=120, retry=5)
    assert monitor.check_once() is False
    assert monitor.next_delay() == 5
    assert 'database health check failed' in caplog.text


def test_background_thread_runs_and_stops(monkeypatch):
    ran = threading.Event()

    def fake_check(alias='default'):
        ran.set()
        return True

    monkeypatch.setattr(dbhealth, 'check_database', fake_check)
    monitor = dbhealth.DatabaseHealthMonitor(interval=60, retry=1)
    monitor.start()
    try:
        assert ran.wait(2)
        assert monitor.running
    finally:
        monitor.stop(timeout=2)
    assert not monitor.running


def test_monitor_can_be_disabled(settings):
    settings.DB_HEALTHCHECK_ENABLED = False
    assert dbhealth.start_health_monitor() is None


def test_healthz_is_public():
    r = APIClient().get(reverse('healthz'))
    assert r.status_code == 200
    assert r.json() == {'ok': True, 'db': True}


def test_transient_store_error_maps_to_503(api, monkeypatch):
    from care.services import medical_records

    def unavailable(user):
        raise OperationalError('pool timeout')

    monkeypatch.setattr(medical_records, 'list_medical_records', unavailable)
    r = api.get(reverse('medical_records'))
    assert r.status_code == 503
    assert r.data['error']['code'] == 'store_unavailable'


def test_check_database_command(capsys):
    call_command('check_database')
    assert 'database ok' in capsys.readouterr().out
