import os

from .config import Config, env_bool

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

API_BASE_URL = Config.API_BASE_URL
API_TIMEOUT_SECONDS = Config.API_TIMEOUT_SECONDS

SESSION_DAYS = Config.SESSION_DAYS
SESSION_COOKIE_SECURE = False
NOTIFY_BACKEND_ON_LOGOUT = Config.NOTIFY_BACKEND_ON_LOGOUT

DEBUG = env_bool("DEBUG", True)
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
