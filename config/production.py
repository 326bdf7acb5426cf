import os

from .config import Config, env_bool

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_BASE_URL = Config.API_BASE_URL
API_TIMEOUT_SECONDS = Config.API_TIMEOUT_SECONDS

SESSION_DAYS = Config.SESSION_DAYS
SESSION_COOKIE_SECURE = env_bool("SESSION_COOKIE_SECURE", True)
NOTIFY_BACKEND_ON_LOGOUT = Config.NOTIFY_BACKEND_ON_LOGOUT

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL
