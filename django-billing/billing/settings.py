"""Django settings for the billing project.

Only what statement generation needs: installed apps, number formatting,
logging and the pricing policy overrides.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "insecure-dev-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "") == "1"

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "theater.apps.TheaterConfig",
]

DATABASES = {}

LANGUAGE_CODE = "en-us"

USE_I18N = False

USE_THOUSAND_SEPARATOR = True

# Overrides for theater.services.pricing.PricingPolicy, keyed by upper-cased
# field name. Empty means the standard rates.
THEATER_PRICING = {}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "theater": {
            "level": os.environ.get("THEATER_LOG_LEVEL", "INFO"),
        },
    },
}
