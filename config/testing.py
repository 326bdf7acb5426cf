import os

SECRET_KEY = "test-secret"

API_BASE_URL = os.getenv("API_BASE_URL", "http://backend.test/api")
API_TIMEOUT_SECONDS = 5

SESSION_DAYS = 1
SESSION_COOKIE_SECURE = False
NOTIFY_BACKEND_ON_LOGOUT = False

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
