# vwaper/config.py
import os
from dataclasses import dataclass
from dotenv import load_dotenv

# Loads variables from a local .env file into environment variables (dev only).
load_dotenv()


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # App config
    app_env: str
    log_level: str
    preload_source: bool

    # Input source config
    source: str
    input_path: str
    input_url: str
    http_timeout_seconds: float

    # Report config
    delimiter: str


def get_settings() -> Settings:
    """
    Reads env vars and returns a Settings object.
    """
    source = os.getenv("VWAPER_SOURCE", "FILE").strip().upper()
    input_url = os.getenv("VWAPER_INPUT_URL", "").strip()
    if source == "HTTP" and not input_url:
        raise RuntimeError("VWAPER_INPUT_URL is missing. Required when VWAPER_SOURCE=HTTP")

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    if log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise RuntimeError(f"Unknown LOG_LEVEL='{log_level}'")

    delimiter = os.getenv("VWAPER_DELIMITER", "#").strip()
    if not delimiter:
        raise RuntimeError("VWAPER_DELIMITER must not be empty")

    return Settings(
        app_env=os.getenv("APP_ENV", "local"),
        log_level=log_level,
        preload_source=_env_flag("PRELOAD_SOURCE"),
        source=source,
        input_path=os.getenv("VWAPER_INPUT_PATH", "data/market.txt"),
        input_url=input_url,
        http_timeout_seconds=float(os.getenv("VWAPER_HTTP_TIMEOUT_SECONDS", "20")),
        delimiter=delimiter,
    )
