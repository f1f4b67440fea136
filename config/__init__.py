import os

SETTINGS_MODULES = {
    "development": "config.development",
    "dev": "config.development",
    "testing": "config.testing",
    "test": "config.testing",
    "production": "config.production",
    "prod": "config.production",
}


def get_settings_module(env: str | None = None) -> str:
    """Settings module for APP_ENV; unknown names fall back to development."""
    env = (env or os.getenv("APP_ENV") or "development").strip().lower()
    return SETTINGS_MODULES.get(env, "config.development")
