# config.py
from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    # --- Metadata ---
    APP_NAME: str = "Interview Coach API"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = "API for interview answer evaluation and proofreading"

    # --- Logging ---
    LOG_LEVEL: str = Field("INFO")
    LOG_FILE: Optional[str] = Field(None)
    JSON_LOGS: bool = Field(False)

    # --- CORS ---
    ALLOWED_ORIGINS: List[str] = Field(["*"])

    # --- Proofreading service ---
    PRIVATE_YAHOO_APP_ID: Optional[str] = Field(None)
    PROOFREAD_API_URL: str = Field("https://jlp.yahooapis.jp/KouseiService/V2/kousei")
    PROOFREAD_TIMEOUT_SEC: float = Field(10.0, gt=0)
    PROOFREAD_MAX_CHARS: int = Field(2000, ge=1)

    # --- Rate limiting (per client, for correction requests) ---
    RATE_LIMIT_REQUESTS: int = Field(5, ge=1)
    RATE_LIMIT_WINDOW_MS: int = Field(60_000, ge=1)
    RATE_LIMIT_MAX_CLIENTS: int = Field(10_000, ge=1)

    # --- Transcript analysis ---
    FILLER_MIN_COUNT: int = Field(1, ge=1)
    INCLUDE_PREP: bool = Field(True)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = AppSettings()
