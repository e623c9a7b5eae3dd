import logging
import os

from dotenv import load_dotenv

load_dotenv()

PROJECT_NAME = "Noteful API"
VERSION = "1.0.0"
API_PREFIX = "/api"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()
# getLevelName maps known names to their number and anything else to "Level <name>"
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    LOG_LEVEL = "INFO"

CORS_ORIGINS = [
    origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
]
