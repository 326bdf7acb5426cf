"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

TOKEN_STORAGE_KEY = "token"
LOGIN_ENDPOINT = "login"
DEFAULT_ENDPOINT = "dashboard"

# Endpoints reachable without a session besides the login view.
PUBLIC_ENDPOINTS = frozenset({LOGIN_ENDPOINT, "static"})

LOW_ATTENDANCE_PERCENT = 75.0
GUARDIAN_PHONE_DIGITS = 10

DEFAULT_API_TIMEOUT_SECONDS = 20
ERROR_BODY_LOG_LIMIT = 500

MSG_SESSION_EXPIRED = "Your session has expired. Please sign in again."
MSG_BACKEND_UNREACHABLE = "The attendance server is unreachable. Please try again shortly."
MSG_SYNC_FAILED = "Data synchronization failed. Please refresh."
