import os


def env_bool(name, default=False):
    val = os.environ.get(name)
    if val is None:
        return default
    return str(val).strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key"

    # Single backend address for every view
    API_BASE_URL = os.environ.get("API_BASE_URL", "http://localhost:5000/api")
    API_TIMEOUT_SECONDS = float(os.environ.get("API_TIMEOUT_SECONDS", "20"))

    # Signed-cookie lifetime; the credential's own expiry still decides validity
    SESSION_DAYS = int(os.environ.get("SESSION_DAYS", "7"))
    SESSION_COOKIE_SECURE = env_bool("SESSION_COOKIE_SECURE", False)
    NOTIFY_BACKEND_ON_LOGOUT = env_bool("NOTIFY_BACKEND_ON_LOGOUT", False)

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
