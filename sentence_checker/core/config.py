# sentence_checker/core/config.py
import os
from dotenv import load_dotenv

# .env 파일 로드
load_dotenv()

class Settings:
    SENTENCE_RULES_FILE: str = os.getenv("SENTENCE_RULES_FILE", "")
    SLOW_REQUEST_MS: float = float(os.getenv("SLOW_REQUEST_MS", "2000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    CORS_ALLOW_ORIGINS: str = os.getenv("CORS_ALLOW_ORIGINS", "*")

    @property
    def cors_origins(self) -> list:
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]

settings = Settings()

APP_VERSION = "1.0.0"
