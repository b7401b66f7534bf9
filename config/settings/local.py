from .base import *  # noqa
from .base import env

# GENERAL
# ------------------------------------------------------------------------------
DEBUG = True
SECRET_KEY = env(
    "DJANGO_SECRET_KEY",
    default="q3VtR6iYl0bN8cWm2ZxH5dTg9kPjA4sLfE7uQ1oBwC6rXyJ0nMvD3hUe8aGiKzS5",
)
ALLOWED_HOSTS = ["localhost", "0.0.0.0", "127.0.0.1"] + env.list("DJANGO_ALLOWED_HOSTS", default=[])

# CACHES
# ------------------------------------------------------------------------------
if not env("REDIS_URL", default=None):
    CACHES = {
        "default": {
            "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
            "LOCATION": "medrep-local",
        }
    }

# LOGGING
# ------------------------------------------------------------------------------
LOGGING["loggers"]["medrep"]["level"] = env("MEDREP_LOG_LEVEL", default="DEBUG")  # noqa: F405
