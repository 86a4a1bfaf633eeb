from pydantic import BaseModel
import os
from dotenv import load_dotenv

load_dotenv()


def _split_csv(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings(BaseModel):
    # ===============================
    # MongoDB
    # ===============================
    mongo_uri: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
    db_name: str = os.getenv("DB_NAME", "moodtracker")
    mongo_timeout_ms: int = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))

    # ===============================
    # Dashboard
    # ===============================
    trend_window_days: int = int(os.getenv("TREND_WINDOW_DAYS", "7"))
    range_default_hours: int = int(os.getenv("RANGE_DEFAULT_HOURS", "168"))

    # ===============================
    # Logging
    # ===============================
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_json: bool = os.getenv("LOG_JSON", "false").lower() in ("1", "true", "yes")

    # ===============================
    # CORS (Vite dev by default)
    # ===============================
    cors_origins: list[str] = _split_csv(
        os.getenv("CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173")
    )


settings = Settings()
