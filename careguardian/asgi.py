"""
ASGI config for the CareGuardian project.

Order matters: configure Django before importing any Django-dependent modules.
"""
import os

# 1) Configure settings before any Django import
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "careguardian.settings")

# 2) Build the HTTP app (this also runs django.setup())
from django.core.asgi import get_asgi_application  # noqa: E402

application = get_asgi_application()

# 3) Now Django-dependent modules can be imported
from care.services.dbhealth import start_health_monitor  # noqa: E402

start_health_monitor()
