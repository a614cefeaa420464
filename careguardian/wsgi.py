"""
WSGI config for the CareGuardian project.

It exposes the WSGI callable as a module-level variable named ``application``
and starts the background database health monitor for the serving process.
"""
import os

from django.core.wsgi import get_wsgi_application  # type: ignore

# Set the default settings module for the 'django' program.
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'careguardian.settings')

# Obtain the WSGI application for use by the server
application = get_wsgi_application()

from care.services.dbhealth import start_health_monitor  # noqa: E402

start_health_monitor()
