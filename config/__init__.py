import os

# APP_ENV aliases -> settings module
SETTINGS_MODULES = {
    "dev": "config.development",
    "development": "config.development",
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    """Settings module named by APP_ENV (development when unset or blank)."""
    env = (os.getenv("APP_ENV") or "development").strip().lower()
    try:
        return SETTINGS_MODULES[env]
    except KeyError:
        known = ", ".join(sorted(SETTINGS_MODULES))
        raise ValueError(f"Unknown APP_ENV {env!r}; expected one of: {known}") from None
