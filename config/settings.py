#config/settings

import os
from dotenv import load_dotenv

# Load variables from the .env file
load_dotenv()

APP_NAME = os.getenv("APP_NAME", "Ninho API")
APP_VERSION = "0.2.0"

# Database
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./ninho.db")

# JWT settings
JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret-change-me")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRE_HOURS = int(os.getenv("JWT_EXPIRE_HOURS", "72"))
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "ninho_session")

# Zone used for naive inputs when the client sends no X-Timezone header
DEFAULT_TIMEZONE = os.getenv("DEFAULT_TIMEZONE", "UTC")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]
