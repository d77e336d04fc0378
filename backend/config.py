import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _split_origins(raw: str) -> list:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Config:
    # Frontend dev servers allowed to call /api/*
    CORS_ORIGINS = _split_origins(
        os.environ.get("CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173")
    )

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


class TestConfig(Config):
    TESTING = True


def configure_logging(level="INFO") -> None:
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
