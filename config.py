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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./portal_access.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")
    PUBLIC_BASE_URL = data.get("PUBLIC_BASE_URL", "http://localhost:5173")
    CUSTOMER_TOKEN_STORAGE_KEY = data.get("CUSTOMER_TOKEN_STORAGE_KEY", "customer_auth_token")

    # Sessions and credentials
    SESSION_TTL_HOURS = int(data.get("SESSION_TTL_HOURS", 720))  # 0 disables expiry
    MIN_PASSWORD_LENGTH = int(data.get("MIN_PASSWORD_LENGTH", 6))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))

    # Invitations
    INVITATION_TTL_HOURS = int(data.get("INVITATION_TTL_HOURS", 168))
    INVITATION_MAX_TTL_HOURS = int(data.get("INVITATION_MAX_TTL_HOURS", 24 * 365))

    # Store access
    STORE_TIMEOUT_SECONDS = float(data.get("STORE_TIMEOUT_SECONDS", 5.0))
    STORE_RETRY_ATTEMPTS = int(data.get("STORE_RETRY_ATTEMPTS", 2))
    STORE_RETRY_BACKOFF_SECONDS = float(data.get("STORE_RETRY_BACKOFF_SECONDS", 0.2))
