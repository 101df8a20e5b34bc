"""WSGI entry point for squashStats.

Production servers (gunicorn, mod_wsgi) load the module-level `application`.
"""

from __future__ import annotations

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "squashStats.settings")

application = get_wsgi_application()
