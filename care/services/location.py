"""
Pass-through proxies to OpenStreetMap services.

The JSON returned by Nominatim and Overpass is handed back unchanged.
"""
from __future__ import annotations

import logging

import requests
from django.conf import settings

from care.exceptions import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_RADIUS = 5000


def _get_json(url: str, params: dict):
    resp = requests.get(
        url, params=params,
        headers={'User-Agent': settings.LOCATION_USER_AGENT},
        timeout=settings.LOCATION_TIMEOUT,
    )
    resp.raise_for_status()
    return resp.json()


def reverse_geocode(lat: float, lon: float):
    try:
        return _get_json(settings.NOMINATIM_URL, {'lat': lat, 'lon': lon, 'format': 'json'})
    except (requests.RequestException, ValueError) as exc:
        logger.error('Nominatim reverse geocode error: %s', exc)
        raise UpstreamError('Failed to reverse geocode location') from exc


def overpass_hospitals_query(lat: float, lon: float, radius=DEFAULT_RADIUS) -> str:
    return f"[out:json];node(around:{radius},{lat},{lon})[amenity=hospital];out;"


def nearby_hospitals(lat: float, lon: float, radius=None):
    query = overpass_hospitals_query(lat, lon, radius or DEFAULT_RADIUS)
    try:
        return _get_json(settings.OVERPASS_URL, {'data': query})
    except (requests.RequestException, ValueError) as exc:
        logger.error('Overpass API fetch error: %s', exc)
        raise UpstreamError('Failed to fetch nearby hospitals from OpenStreetMap') from exc
