"""
Configuration for the blog search service.

Built once at startup and passed to the components that need paths or
scoring parameters. Values come from environment variables, optionally
loaded from .env.local (highest priority) or .env.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_INDEX_PATH = "data.json"
DEFAULT_LOG_FILE = "logs/blogsearch.log"


def _env_float(key: str, default: float) -> float:
    raw = os.getenv(key)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Invalid {key}={raw!r}, using default {default}")
        return default


def _env_int(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid {key}={raw!r}, using default {default}")
        return default


def load_env_files(root: Optional[Path] = None) -> Optional[Path]:
    """Load .env.local or .env from root (cwd by default). Returns the file used."""
    root = root or Path.cwd()
    env_local = root / ".env.local"
    env_file = root / ".env"
    
    if env_local.exists():
        load_dotenv(env_local, override=True)
        return env_local
    if env_file.exists():
        load_dotenv(env_file, override=True)
        return env_file
    return None


@dataclass(frozen=True)
class Settings:
    """Runtime configuration"""
    articles_dir: str  # kept as configured, it prefixes every document id
    index_path: Path = Path(DEFAULT_INDEX_PATH)
    k1: float = 1.2
    b: float = 0.75
    log_level: str = "INFO"
    log_file: Optional[str] = DEFAULT_LOG_FILE
    port: int = 8080
    
    @classmethod
    def from_env(cls, load_files: bool = True) -> "Settings":
        """
        Build settings from environment variables.
        
        Variables:
            SITE_PATH: website folder, articles live in <SITE_PATH>/articles (default: .)
            ARTICLES_PATH: explicit article directory (overrides SITE_PATH)
            INDEX_PATH: persisted index file (default: data.json)
            BM25_K1, BM25_B: scoring parameters (default: 1.2, 0.75)
            LOG_LEVEL: console log level (default: INFO)
            LOG_FILE: log file base path, empty disables file logging
            PORT: HTTP port (default: 8080)
        """
        if load_files:
            env_path = load_env_files()
            if env_path:
                logger.info(f"Loaded environment from: {env_path}")
        
        site_path = os.getenv("SITE_PATH", ".")
        articles_dir = os.getenv("ARTICLES_PATH") or f"{site_path}/articles"
        log_file = os.getenv("LOG_FILE", DEFAULT_LOG_FILE) or None
        
        return cls(
            articles_dir=articles_dir,
            index_path=Path(os.getenv("INDEX_PATH", DEFAULT_INDEX_PATH)),
            k1=_env_float("BM25_K1", 1.2),
            b=_env_float("BM25_B", 0.75),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_file=log_file,
            port=_env_int("PORT", 8080),
        )