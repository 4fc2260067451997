import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")
DEFAULT_SESSION_SECRET = "change-me-in-env-yaml"

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./goldbill.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    AUTH_DISABLED = bool(data.get("AUTH_DISABLED", False))
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ENABLE_SENTRY = data.get("ENABLE_SENTRY", 0)
    DSN_SENTRY = data.get("DSN_SENTRY", "")
    SENTRY_ENVIRONMENT = data.get("SENTRY_ENVIRONMENT", "dev")

    # Session cookie
    SESSION_SECRET = data.get("SESSION_SECRET", DEFAULT_SESSION_SECRET)
    SESSION_MAX_AGE = data.get("SESSION_MAX_AGE", 7 * 24 * 3600)  # Seconds
    SESSION_HTTPS_ONLY = bool(data.get("SESSION_HTTPS_ONLY", False))

    # Start-up seeding
    SEED_ON_STARTUP = bool(data.get("SEED_ON_STARTUP", True))
    SEED_SAMPLE_CUSTOMERS = bool(data.get("SEED_SAMPLE_CUSTOMERS", True))
    DEFAULT_USERNAME = data.get("DEFAULT_USERNAME", "admin")
    DEFAULT_PASSWORD = data.get("DEFAULT_PASSWORD", None)  # No default user when unset

    # Invoicing
    INVOICE_DUE_DAYS = data.get("INVOICE_DUE_DAYS", 15)  # Default due date offset
