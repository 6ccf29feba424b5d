# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
from typing import Optional
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or value.strip() == "":
        return None
    return float(value)


# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# API Settings
_API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8080")
# Unset means requests waits indefinitely
_API_TIMEOUT = _optional_float(os.getenv("API_TIMEOUT"))

# UI Settings
_APP_LANGUAGE = os.getenv("APP_LANGUAGE", "pt")
_LOGS_DIR = os.getenv("LOGS_DIR", None)

# Logging Settings
_LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
_LOG_CONSOLE_LEVEL = os.getenv("LOG_CONSOLE_LEVEL", "INFO").upper()
_LOG_TO_CONSOLE = os.getenv("LOG_TO_CONSOLE", "true").lower() in ("1", "true", "yes")


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Cadastro"
    APP_TITLE: str = "Cadastro de UF, Municípios, Bairros e Pessoas"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "Cadastro"

    # HTTP API Backend Settings
    # ✅ DYNAMIC: Reads from .env file (API_BASE_URL, API_TIMEOUT)
    # If .env not found, uses default (http://localhost:8080)
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: Optional[float] = _API_TIMEOUT

    # Keys the backend may use for the human-readable message of a 404 body
    API_ERROR_MESSAGE_KEYS: tuple = ("mensagem", "message")
    API_REJECTION_STATUS: int = 404

    # Language
    DEFAULT_LANGUAGE: str = _APP_LANGUAGE

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = Path(_LOGS_DIR) if _LOGS_DIR else PROJECT_ROOT / "logs"

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
    LOG_LEVEL: str = _LOG_LEVEL
    LOG_CONSOLE_LEVEL: str = _LOG_CONSOLE_LEVEL
    LOG_TO_CONSOLE: bool = _LOG_TO_CONSOLE
    LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

    # Window
    WINDOW_MIN_WIDTH: int = 960
    WINDOW_MIN_HEIGHT: int = 640

    # Colors
    PRIMARY_COLOR: str = "#0072BC"
    ERROR_COLOR: str = "#dc3545"
    BORDER_COLOR: str = "#E1E8ED"
    TEXT_COLOR: str = "#212B36"


class Endpoints:
    """Collection-level endpoints of the backend API."""
    UF = "/uf"
    MUNICIPIO = "/municipio"
    BAIRRO = "/bairro"
    PESSOA = "/pessoa"
