"""Configuration management for the gym API."""

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Human Sport API")
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./humansport.db")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "change_me")
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "180"))
    DEBUG_MODE: bool = os.getenv("DEBUG_MODE", "false").lower() in {"1", "true", "yes"}

    CORS_ORIGINS: list[str] = _split_csv(
        os.getenv("CORS_ORIGINS", "http://localhost:4200,http://localhost:80")
    )

    AWS_REGION: str = os.getenv("AWS_REGION", "us-east-1")
    AWS_ACCESS_KEY_ID: str = os.getenv("AWS_ACCESS_KEY_ID", "")
    AWS_SECRET_ACCESS_KEY: str = os.getenv("AWS_SECRET_ACCESS_KEY", "")
    S3_BUCKET: str = os.getenv("S3_BUCKET", "human-sport")
    S3_PUBLIC_URL: str = os.getenv("S3_PUBLIC_URL", "")

    SENSOR_SERIAL_PORT: str = os.getenv("SENSOR_SERIAL_PORT", "")
    SENSOR_BAUD_RATE: int = int(os.getenv("SENSOR_BAUD_RATE", "115200"))


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()


__all__ = ["settings", "Settings", "get_settings"]
