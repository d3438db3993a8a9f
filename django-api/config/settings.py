"""Django settings for the ticket purchases project.

Purchase policy values can be overridden from the environment.
"""

import os

from django.core.exceptions import ImproperlyConfigured


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name, default)
    try:
        return int(value)
    except ValueError:
        raise ImproperlyConfigured(f"{name} must be an integer, got {value!r}")


SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "insecure-dev-key")
DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() == "true"
ALLOWED_HOSTS: list[str] = []

INSTALLED_APPS = [
    "purchases.apps.PurchasesConfig",
]

# Purchases are not persisted.
DATABASES: dict = {}

USE_TZ = True

TICKET_PRICES = {
    "INFANT": _env_int("TICKET_PRICE_INFANT", 0),
    "CHILD": _env_int("TICKET_PRICE_CHILD", 10),
    "ADULT": _env_int("TICKET_PRICE_ADULT", 20),
}
MAX_TICKETS_PER_PURCHASE = _env_int("MAX_TICKETS_PER_PURCHASE", 20)

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "fmt": "%(levelname)s %(name)s %(message)s %(asctime)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "purchases": {
            "level": os.environ.get("PURCHASES_LOG_LEVEL", "INFO"),
        },
    },
}
