"""
Test settings for the wedding site project.
"""

import os

os.environ.setdefault('DATABASE_URL', 'sqlite://:memory:')

from config.database import parse_database_url  # noqa: E402

from .base import *  # noqa: E402, F401, F403

DEBUG = False

# Always an isolated in-memory database, whatever DATABASE_URL says
DATABASES = {
    'default': parse_database_url('sqlite://:memory:'),
}

ALLOWED_HOSTS = ['testserver', 'localhost']

# Faster password hashing for tests
PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

# In-memory cache
CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
    }
}

# Disable throttling in tests
REST_FRAMEWORK['DEFAULT_THROTTLE_CLASSES'] = []  # noqa: F405
REST_FRAMEWORK['DEFAULT_THROTTLE_RATES'] = {}  # noqa: F405

# No manifest is built for tests
STORAGES['staticfiles'] = {  # noqa: F405
    'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
}

WEDDING_PAGE_CACHE_SECONDS = 0
SEED_ON_STARTUP = False

# Let records propagate to the root logger so pytest's caplog sees them
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
}
