import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./planeja.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")

    # Invitations
    INVITE_RATE_LIMIT_MAX = int(data.get("INVITE_RATE_LIMIT_MAX", 5))
    INVITE_RATE_LIMIT_WINDOW_SECONDS = int(
        data.get("INVITE_RATE_LIMIT_WINDOW_SECONDS", 60)
    )
    INVITE_RATE_LIMIT_BLOCK_SECONDS = int(
        data.get("INVITE_RATE_LIMIT_BLOCK_SECONDS", 30)
    )
    INVITE_DEFAULT_EXPIRATION_DAYS = int(data.get("INVITE_DEFAULT_EXPIRATION_DAYS", 7))
    INVITE_RESEND_EXTENSION_DAYS = int(data.get("INVITE_RESEND_EXTENSION_DAYS", 7))
    ENABLE_EXPIRY_SWEEP = bool(data.get("ENABLE_EXPIRY_SWEEP", True))
    EXPIRY_SWEEP_INTERVAL_SECONDS = int(data.get("EXPIRY_SWEEP_INTERVAL_SECONDS", 60))
    AUTO_CREATE_SCHEMA = bool(data.get("AUTO_CREATE_SCHEMA", True))
