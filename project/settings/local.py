# project/settings/local.py
"""Local development settings."""

import os

os.environ.setdefault("DJANGO_SECRET_KEY", "dev-only-not-secret")

from .base import *  # noqa

DEBUG = True
ALLOWED_HOSTS = ["*"]
