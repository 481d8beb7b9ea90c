import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


class Settings(BaseModel):
    telegram_token: str
    db_url: str = "sqlite:///finance.db"
    webhook_url: Optional[str] = None
    webhook_secret: Optional[str] = None
    port: int = 8443
    chart_base_url: Optional[str] = None
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    token = os.getenv("TELEGRAM_TOKEN")
    if not token:
        raise RuntimeError("TELEGRAM_TOKEN not set")

    return Settings(
        telegram_token=token,
        db_url=os.getenv("DATABASE_URL") or "sqlite:///finance.db",
        webhook_url=os.getenv("WEBHOOK_URL") or None,
        webhook_secret=os.getenv("WEBHOOK_SECRET") or None,
        port=int(os.getenv("PORT", "8443")),
        # без этого графики не отправляются, только текст
        chart_base_url=os.getenv("CHART_BASE_URL") or None,
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
