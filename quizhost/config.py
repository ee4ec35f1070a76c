# config.py
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

# Origins the original deployment served from
DEFAULT_CORS_ORIGINS = [
    "https://vinjanakeralamquiz.onrender.com",
    "https://vinjanakeralamquizz.onrender.com",
    "http://localhost:8080",
    "http://localhost:3000",
]

def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}

@dataclass(frozen=True)
class Settings:
    database_url: str = "sqlite:///./quizhost.db"
    admin_api_key: str = "ADMIN123"
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    seed_demo_quiz: bool = True
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

def load_settings() -> Settings:
    load_dotenv()

    origins = os.getenv("CORS_ORIGINS")
    return Settings(
        database_url=os.getenv("DATABASE_URL", "sqlite:///./quizhost.db"),
        admin_api_key=os.getenv("ADMIN_API_KEY", "ADMIN123"),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()] if origins else list(DEFAULT_CORS_ORIGINS),
        seed_demo_quiz=_as_bool(os.getenv("SEED_DEMO_QUIZ", "true")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3000")),
    )
