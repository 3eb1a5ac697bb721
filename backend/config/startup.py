"""
Tasks that run once per process, after Django is set up and before the
first request is served.
"""

import logging

from django.conf import settings

from apps.core.bootstrap import seed_roles_and_admin

logger = logging.getLogger(__name__)


def run_startup_tasks():
    if not settings.SEED_ON_STARTUP:
        logger.debug("SEED_ON_STARTUP is off; skipping role/admin seed")
        return None

    result = seed_roles_and_admin()
    if result.changed:
        logger.info(
            "Startup seed created roles=%s admin=%s",
            result.created_roles,
            result.admin_created,
        )
    return result
