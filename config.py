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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./vaults.db")
    API_PREFIX = data.get("API_PREFIX", "")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_EXPIRE_MINUTES = int(data.get("JWT_EXPIRE_MINUTES", 60 * 24))
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")
    TRIAL_DAYS = int(data.get("TRIAL_DAYS", 30))
    APP_BASE_URL = data.get("APP_BASE_URL", "http://localhost:3000")
    DEFAULT_VAULT_IMAGE_URL = data.get(
        "DEFAULT_VAULT_IMAGE_URL",
        "https://images.unsplash.com/photo-1502672260266-1c1ef2d93688?w=1080",
    )
    SENDGRID_API_KEY = data.get("SENDGRID_API_KEY", "")
    SENDGRID_FROM_EMAIL = data.get("SENDGRID_FROM_EMAIL", "noreply@caixinhas.finance")
    SENDGRID_FROM_NAME = data.get("SENDGRID_FROM_NAME", "Caixinhas")
    EMAIL_TIMEOUT_SECONDS = float(data.get("EMAIL_TIMEOUT_SECONDS", 10.0))
