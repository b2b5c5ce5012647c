from .base import *  # noqa: F401, F403

ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["newshub.example.com"])  # noqa: F405

DEBUG = False

CSRF_TRUSTED_ORIGINS = env.list(  # noqa: F405
    "CSRF_TRUSTED_ORIGINS", default=["https://newshub.example.com"]
)
