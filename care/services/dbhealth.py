"""
Background database connectivity check.

``DatabaseHealthMonitor`` runs ``SELECT 1`` once at start and then on a
fixed interval.  A failed check is logged and retried after a short
delay; the monitor never raises into the serving process.  Each check
uses its own connection and closes it afterwards so pooled connections
are returned immediately.
"""
from __future__ import annotations

import logging
import threading

from django.conf import settings
from django.db import DatabaseError, connections

logger = logging.getLogger(__name__)


def check_database(alias: str = 'default') -> bool:
    conn = connections[alias]
    try:
        with conn.cursor() as cursor:
            cursor.execute('SELECT 1')
            row = cursor.fetchone()
        return bool(row and row[0] == 1)
    finally:
        # inside a transaction the connection belongs to the caller
        if not conn.in_atomic_block:
            conn.close()


class DatabaseHealthMonitor:
    def __init__(self, interval: float | None = None, retry: float | None = None, alias: str = 'default'):
        self.interval = interval if interval is not None else settings.DB_HEALTHCHECK_INTERVAL
        self.retry = retry if retry is not None else settings.DB_HEALTHCHECK_RETRY
        self.alias = alias
        self.last_ok: bool | None = None
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def check_once(self) -> bool:
        try:
            ok = check_database(self.alias)
        except DatabaseError as exc:
            logger.error('database health check failed: %s', exc)
            ok = False
        if ok and self.last_ok is not True:
            logger.info('database connection verified')
        self.last_ok = ok
        return ok

    def next_delay(self) -> float:
        return self.interval if self.last_ok else self.retry

    def _run(self) -> None:
        while not self._stop.is_set():
            self.check_once()
            self._stop.wait(self.next_delay())

    def start(self) -> None:
        if self._thread and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name='db-health-monitor', daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        self._stop.set()
        if self._thread:
            self._thread.join(timeout)
            self._thread = None

    @property
    def running(self) -> bool:
        return bool(self._thread and self._thread.is_alive())


_monitor: DatabaseHealthMonitor | None = None
_monitor_lock = threading.Lock()


def start_health_monitor() -> DatabaseHealthMonitor | None:
    """Start the process-wide monitor unless disabled by ``DB_HEALTHCHECK_ENABLED``."""
    global _monitor
    if not getattr(settings, 'DB_HEALTHCHECK_ENABLED', True):
        return None
    with _monitor_lock:
        if _monitor is None:
            _monitor = DatabaseHealthMonitor()
        _monitor.start()
        return _monitor
