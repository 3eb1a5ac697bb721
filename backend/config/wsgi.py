"""
WSGI config for the wedding site project.

Seeds the Admin/User roles and the admin account before serving, the
same way the ASGI entry point does.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.production')

application = get_wsgi_application()

from config.startup import run_startup_tasks  # noqa: E402

run_startup_tasks()
