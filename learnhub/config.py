import os

from dotenv import load_dotenv

load_dotenv()


def _split_csv(raw: str):
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings:
    """Runtime configuration read from the environment (and a local .env)."""

    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./learnhub.db")
    UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads")
    MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))
    CHAT_HISTORY_LIMIT = int(os.getenv("CHAT_HISTORY_LIMIT", "50"))
    CORS_ORIGINS = _split_csv(os.getenv("CORS_ORIGINS", "*"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
