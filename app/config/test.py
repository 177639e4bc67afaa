# -*- coding: utf-8 -*-
"""Test configuration with safe defaults and no external services."""

from . import getenv_or_action
# Don't import from base to avoid environment variable loading

# Environment
environment = "test"

# Logging
LOG_LEVEL = "DEBUG"

# Timezone configuration
TIMEZONE = "America/Sao_Paulo"

# Sentry (disabled for tests)
SENTRY_ENABLE = False
SENTRY_DSN = None
SENTRY_ENVIRONMENT = None

# Database configuration (use test database)
DATABASE_HOST = getenv_or_action("TEST_DATABASE_HOST", default="localhost")
DATABASE_PORT = getenv_or_action("TEST_DATABASE_PORT", default="5432")
DATABASE_USER = getenv_or_action("TEST_DATABASE_USER", default="postgres")
DATABASE_PASSWORD = getenv_or_action("TEST_DATABASE_PASSWORD", default="postgres")
DATABASE_NAME = getenv_or_action("TEST_DATABASE_NAME", default="fleet_test")

# CORS configuration
ALLOWED_ORIGINS = ["*"]
ALLOWED_ORIGINS_REGEX = None
ALLOWED_METHODS = ["*"]
ALLOWED_HEADERS = ["*"]
ALLOW_CREDENTIALS = True

# Rate limits (more permissive for tests)
RATE_LIMIT_DEFAULT = "10000/second"
RATE_LIMIT_STORAGE_URI = "memory://"

# Return trip analysis
RETURN_TRIP_ANALYSIS_WINDOW_DAYS = 30
RETURN_TRIP_ANALYSIS_TRIP_LIMIT = 100
RETURN_TRIP_ANALYSIS_MAX_CONCURRENCY = 1
