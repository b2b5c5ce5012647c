from pathlib import Path

import environ
import sentry_sdk

BASE_DIR = Path(__file__).resolve().parent.parent.parent

env = environ.Env(
    DEBUG=(bool, False),
)
environ.Env.read_env(BASE_DIR / ".env")

SECRET_KEY = env("SECRET_KEY", default="django-insecure-newshub")

DEBUG = env("DEBUG")

ALLOWED_HOSTS: list[str] = env.list("ALLOWED_HOSTS", default=[])

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "newshub.middleware.AuthGateMiddleware",
]

ROOT_URLCONF = "newshub.urls"

DATABASES: dict = {}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_TZ = True

STATIC_URL = "static/"

# ========================================================== #
# 인증 게이트 (/admin, /user, /auth)
# ========================================================== #
ADMIN_EMAIL = env("ADMIN_EMAIL", default="")
AUTH_TOKEN_SECRET = env("AUTH_TOKEN_SECRET", default=SECRET_KEY)
AUTH_TOKEN_COOKIE = env("AUTH_TOKEN_COOKIE", default="newshub-session-token")
AUTH_TOKEN_MAX_AGE = env.int("AUTH_TOKEN_MAX_AGE", default=60 * 60 * 24 * 30)
AUTH_TOKEN_VERIFIER = env(
    "AUTH_TOKEN_VERIFIER", default="newshub.auth.verify_token"
)

# ========================================================== #
# 로깅 / 에러 리포팅
# ========================================================== #
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "[{asctime}] {levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "frontend": {
            "handlers": ["console"],
            "level": env("LOG_LEVEL", default="INFO"),
            "propagate": False,
        },
        "newshub": {
            "handlers": ["console"],
            "level": env("LOG_LEVEL", default="INFO"),
            "propagate": False,
        },
    },
}

SENTRY_DSN = env("SENTRY_DSN", default="")
if SENTRY_DSN:
    sentry_sdk.init(
        dsn=SENTRY_DSN,
        environment=env("SENTRY_ENVIRONMENT", default="local"),
        traces_sample_rate=env.float("SENTRY_TRACES_SAMPLE_RATE", default=0.0),
    )
