# -*- coding: utf-8 -*-
from . import getenv_or_action

# Logging
LOG_LEVEL = getenv_or_action("LOG_LEVEL", default="INFO")

# Timezone configuration
TIMEZONE = "UTC"

# Sentry
SENTRY_ENABLE = False
SENTRY_DSN = None
SENTRY_ENVIRONMENT = None

# Rate limits
RATE_LIMIT_DEFAULT = getenv_or_action("RATE_LIMIT_DEFAULT", default="60/minute")
RATE_LIMIT_STORAGE_URI = getenv_or_action(
    "RATE_LIMIT_STORAGE_URI", action="ignore", default="memory://"
)

# Return trip analysis
RETURN_TRIP_ANALYSIS_WINDOW_DAYS = int(
    getenv_or_action("RETURN_TRIP_ANALYSIS_WINDOW_DAYS", default="30")
)
RETURN_TRIP_ANALYSIS_TRIP_LIMIT = int(
    getenv_or_action("RETURN_TRIP_ANALYSIS_TRIP_LIMIT", default="100")
)
RETURN_TRIP_ANALYSIS_MAX_CONCURRENCY = int(
    getenv_or_action("RETURN_TRIP_ANALYSIS_MAX_CONCURRENCY", default="1")
)
