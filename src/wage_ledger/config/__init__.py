import importlib
import os

from dotenv import load_dotenv


def get_settings_module() -> str:
    # APP_ENV picks the settings module, default 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "wage_ledger.config.production"

    if env in {"test", "testing"}:
        return "wage_ledger.config.testing"

    return "wage_ledger.config.development"


def load_settings():
    """Load .env (without overriding real env vars) and import the settings module."""
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())
