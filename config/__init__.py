import os

_ALIASES = {
    "prod": "production",
    "production": "production",
    "test": "testing",
    "testing": "testing",
}


def get_settings_module() -> str:
    """Dotted path of the settings module for the current environment.

    APP_SETTINGS_MODULE wins when set; otherwise APP_ENV picks one of the
    bundled modules and anything unknown falls back to development.
    """
    explicit = os.getenv("APP_SETTINGS_MODULE", "").strip()
    if explicit:
        return explicit

    env = os.getenv("APP_ENV", "development").strip().lower()
    return f"config.{_ALIASES.get(env, 'development')}"
