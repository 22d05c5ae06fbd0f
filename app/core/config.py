# app/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal

class Settings(BaseSettings):
    # App
    ENV: str = "development"
    DEBUG: bool = False

    # Security
    SECRET_KEY: str
    ALGORITHM: Literal["HS256", "HS512"] = "HS256"
    AUTH_REQUIRED: bool = False

    # Database
    DATABASE_URL: str
    DB_ECHO: bool = False

    # Lock inventory lots (SELECT ... FOR UPDATE) while an order is placed
    LOCK_INVENTORY_ROWS: bool = True

    # Rate limits
    ORDER_RATE_LIMIT: str = "30/minute"

    # Frontend
    CORS_ORIGINS: list[str] = [
        "http://localhost:3001",
        "http://127.0.0.1:3001",
    ]


    model_config = SettingsConfigDict(
        env_file=".env",
        extra="forbid",  
    )


settings = Settings()
