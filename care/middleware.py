import logging
import time

logger = logging.getLogger(__name__)


class ApiRequestLogMiddleware:
    """Log ``METHOD path status duration`` for every ``/api`` request."""
    PREFIX = '/api'

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        path = request.path or ''
        if not path.startswith(self.PREFIX):
            return self.get_response(request)

        started = time.monotonic()
        response = self.get_response(request)
        duration_ms = int((time.monotonic() - started) * 1000)
        logger.info('%s %s %s in %dms', request.method, path, response.status_code, duration_ms)
        return response
