import pytest
import requests
from django.urls import reverse

from care.services import location

pytestmark = pytest.mark.django_db


class FakeResponse:
    def __init__(self, payload):
        self._payload = payload

    def raise_for_status(self):
        return None

    def json(self):
        return self._payload


def test_reverse_geocode_passes_json_through(api, monkeypatch):
    calls = []

    def fake_get(url, params=None, headers=None, timeout=None):
        calls.append((url, params))
        return FakeResponse({'display_name': 'Bengaluru, Karnataka'})

    monkeypatch.setattr(location.requests, 'get', fake_get)
    r = api.get(reverse('location_reverse'), {'lat': '12.97', 'lon': '77.59'})
    assert r.status_code == 200
    assert r.data == {'display_name': 'Bengaluru, Karnataka'}
    assert calls[0][1] == {'lat': 12.97, 'lon': 77.59, 'format': 'json'}


def test_lat_lon_required(api):
    r = api.get(reverse('location_reverse'), {'lat': '12.97'})
    assert r.status_code == 400
    assert 'lon' in r.data['errors']
    assert api.get(reverse('location_hospitals')).status_code == 400


def test_nearby_hospitals_default_radius(api, monkeypatch):
    calls = []

    def fake_get(url, params=None, headers=None, timeout=None):
        calls.append(params)
        return FakeResponse({'elements': [{'id': 1, 'tags': {'name': 'Apollo'}}]})

    monkeypatch.setattr(location.requests, 'get', fake_get)
    r = api.get(reverse('location_hospitals'), {'lat': '12.9', 'lon': '77.5'})
    assert r.data['elements'][0]['tags']['name'] == 'Apollo'
    assert calls[0]['data'] == '[out:json];node(around:5000,12.9,77.5)[amenity=hospital];out;'

    api.get(reverse('location_hospitals'), {'lat': '12.9', 'lon': '77.5', 'radius': 1200})
    assert 'around:1200,' in calls[1]['data']


@pytest.mark.parametrize('name,message', [
    ('location_reverse', 'Failed to reverse geocode location'),
    ('location_hospitals', 'Failed to fetch nearby hospitals from OpenStreetMap'),
])
def test_upstream_failure_is_500(api, monkeypatch, name, message):
    def boom(*args, **kwargs):
        raise requests.Timeout('slow')

    monkeypatch.setattr(location.requests, 'get', boom)
    r = api.get(reverse(name), {'lat': '1', 'lon': '2'})
    assert r.status_code == 500
    assert r.data['message'] == message


@pytest.mark.parametrize('params,field', [
    ({'lat': '12.9);node(1)', 'lon': '77.5'}, 'lat'),
    ({'lat': '12.9', 'lon': '77.5;out meta'}, 'lon'),
    ({'lat': '91', 'lon': '77.5'}, 'lat'),
    ({'lat': '12.9', 'lon': '-181'}, 'lon'),
])
def test_coordinates_must_be_numbers_in_range(api, monkeypatch, params, field):
    def fail(*args, **kwargs):
        raise AssertionError('upstream must not be called')

    monkeypatch.setattr(location.requests, 'get', fail)
    r = api.get(reverse('location_hospitals'), params)
    assert r.status_code == 400
    assert field in r.data['errors']
