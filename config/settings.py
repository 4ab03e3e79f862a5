"""
Innochannel – Django Settings (Test & Development Only)
=========================================================
Django hosts the Innochannel events integration app for the
test-suite. Real projects add "innochannel.contrib.django" to
their own INSTALLED_APPS and declare INNOCHANNEL_EVENTS there.
"""

from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = "innochannel-dev-key-not-for-deployment"

DEBUG = True

ALLOWED_HOSTS = []

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "innochannel.contrib.django",
]

MIDDLEWARE = []

# ── Database ──────────────────────────────────────────────────
# The events app has no models; the in-memory DB keeps Django happy.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ── Innochannel Events ────────────────────────────────────────
INNOCHANNEL_EVENTS = {
    "enabled": True,
    "listeners": {},
    "logging": {
        "enabled": False,
        "level": "INFO",
        "include_payload": False,
        "events": [],
    },
}

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "plain"},
    },
    "loggers": {
        "innochannel": {"handlers": ["console"], "level": "INFO"},
    },
}
