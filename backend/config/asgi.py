"""
ASGI config for the wedding site project.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.production')

application = get_asgi_application()

from config.startup import run_startup_tasks  # noqa: E402

run_startup_tasks()
