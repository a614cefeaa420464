"""
Keyed request cache for the CareGuardian API.

Each query key is an API path such as ``/api/appointments``.  Fetched
payloads stay cached until a key is invalidated, normally by
:meth:`QueryClient.mutate` after a write.  Requests are never retried.
"""
from __future__ import annotations

import logging
import threading
from collections import defaultdict
from typing import Any, Callable, Iterable

import requests

logger = logging.getLogger(__name__)

ON_401_THROW = 'throw'
ON_401_RETURN_NONE = 'return_none'


class ApiError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status: int, message: str):
        super().__init__(f"{status}: {message}")
        self.status = status
        self.message = message


class TransportError(ApiError):
    """The request failed before any response arrived; ``status`` is 0."""

    def __init__(self, message: str):
        super().__init__(0, message)


def _error_message(resp: requests.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get('message'):
        return str(body['message'])
    return resp.text or resp.reason or ''


def _decode(resp: requests.Response):
    if resp.status_code == 204 or not resp.content:
        return None
    return resp.json()


class QueryClient:
    """Cache of API responses keyed by request path.

    One instance is owned by the application root and shared by every
    page.  All cache state is guarded by a lock; a per-key generation
    counter keeps an older, slower fetch from overwriting a newer one.
    """

    def __init__(self, base_url: str = '', session: requests.Session | None = None, token: str | None = None):
        self.base_url = base_url.rstrip('/')
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        if token:
            self.set_token(token)
        self._lock = threading.RLock()
        self._cache: dict[str, Any] = {}
        self._issued: dict[str, int] = defaultdict(int)
        self._stored: dict[str, int] = {}
        self._subscribers: dict[str, list[Callable[[Any], None]]] = defaultdict(list)

    def set_token(self, token: str | None) -> None:
        if token:
            self.session.headers['Authorization'] = f'Token {token}'
        else:
            self.session.headers.pop('Authorization', None)

    def url_for(self, path: str) -> str:
        if path.startswith(('http://', 'https://')):
            return path
        return f"{self.base_url}{path}"

    def _send(self, method: str, url: str, **kwargs) -> requests.Response:
        try:
            return self.session.request(method, self.url_for(url), **kwargs)
        except requests.RequestException as exc:
            logger.debug('%s %s failed: %s', method, url, exc)
            raise TransportError(str(exc)) from exc

    # -- raw requests -----------------------------------------------------

    def request(self, method: str, url: str, data: Any = None):
        """Perform one call and return the decoded JSON body (``None`` when empty)."""
        kwargs = {'json': data} if data is not None else {}
        resp = self._send(method.upper(), url, **kwargs)
        if not resp.ok:
            message = _error_message(resp)
            logger.debug('API error: %s - %s', resp.status_code, message)
            raise ApiError(resp.status_code, message)
        return _decode(resp)

    # -- queries ----------------------------------------------------------

    def fetch(self, key: str, on_401: str = ON_401_THROW, force: bool = False):
        with self._lock:
            if not force and key in self._cache:
                return self._cache[key]
            self._issued[key] += 1
            generation = self._issued[key]

        resp = self._send('GET', key)
        if on_401 == ON_401_RETURN_NONE and resp.status_code == 401:
            value = None
        elif not resp.ok:
            raise ApiError(resp.status_code, _error_message(resp))
        else:
            value = _decode(resp)

        self._store(key, generation, value)
        return value

    def _store(self, key: str, generation: int, value) -> bool:
        with self._lock:
            if generation < self._stored.get(key, 0):
                return False
            self._stored[key] = generation
            self._cache[key] = value
            callbacks = list(self._subscribers.get(key, ()))
        for callback in callbacks:
            callback(value)
        return True

    def get_cached(self, key: str, default=None):
        with self._lock:
            return self._cache.get(key, default)

    def set_cached(self, key: str, value) -> None:
        with self._lock:
            self._issued[key] += 1
            generation = self._issued[key]
        self._store(key, generation, value)

    def is_cached(self, key: str) -> bool:
        with self._lock:
            return key in self._cache

    def invalidate(self, prefix: str) -> list[str]:
        """Drop ``prefix`` and every cached key below it; return the dropped keys."""
        with self._lock:
            dropped = [k for k in self._cache if k == prefix or k.startswith(prefix.rstrip('/') + '/') or k.startswith(prefix + '?')]
            for k in dropped:
                del self._cache[k]
        return dropped

    def mutate(self, method: str, url: str, data: Any = None, invalidates: Iterable[str] = ()):
        """Perform a write, then refetch the cached keys it invalidates."""
        result = self.request(method, url, data)
        for prefix in invalidates:
            for key in self.invalidate(prefix):
                try:
                    self.fetch(key, force=True)
                except ApiError as exc:
                    logger.warning('refetch of %s failed: %s', key, exc)
        return result

    # -- subscriptions & lifecycle ---------------------------------------

    def subscribe(self, key: str, callback: Callable[[Any], None]) -> Callable[[], None]:
        with self._lock:
            self._subscribers[key].append(callback)

        def unsubscribe() -> None:
            with self._lock:
                listeners = self._subscribers.get(key, [])
                if callback in listeners:
                    listeners.remove(callback)

        return unsubscribe

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()
            self._stored.clear()

    def close(self) -> None:
        with self._lock:
            self._cache.clear()
            self._stored.clear()
            self._subscribers.clear()
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
