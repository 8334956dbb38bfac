# backend/settings/test.py
"""
PATH: backend/settings/test.py

TEST SETTINGS

- SQLite unless TEST_DATABASE_URL points elsewhere (Postgres runs exercise row locks)
- SQLite transactions start IMMEDIATE so concurrent writers queue
- Fast password hashing
- Throttling disabled so API tests never hit rate limits
"""

from __future__ import annotations

from .base import *  # noqa: F403
from .base import BASE_DIR, REST_FRAMEWORK, env, sqlite_write_options

DEBUG = False

DATABASES = {
    "default": sqlite_write_options(
        env.db(
            "TEST_DATABASE_URL",
            default=f"sqlite:///{BASE_DIR / 'test_db.sqlite3'}",
        )
    ),
}

# A file, not shared-cache memory: threaded purchase tests need real
# database locks, which shared cache replaces with table locks.
if DATABASES["default"]["ENGINE"] == "django.db.backends.sqlite3":
    DATABASES["default"]["TEST"] = {"NAME": str(BASE_DIR / "test_db_run.sqlite3")}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    "DEFAULT_THROTTLE_CLASSES": (),
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {"null": {"class": "logging.NullHandler"}},
    "loggers": {
        "marketplace": {"handlers": ["null"], "propagate": False},
    },
}
