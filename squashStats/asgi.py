"""ASGI entry point for squashStats.

Requests are still handled one at a time per worker; nothing here is async.
"""

from __future__ import annotations

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "squashStats.settings")

application = get_asgi_application()
