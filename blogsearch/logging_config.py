"""Logging setup: brief console output plus a detailed per-session log file"""
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

KEEP_SESSION_LOGS = 5


def _remove_old_sessions(log_path: Path) -> None:
    """Keep the newest KEEP_SESSION_LOGS - 1 session files, the new session makes it KEEP_SESSION_LOGS"""
    existing_logs = sorted(log_path.parent.glob(f"{log_path.stem}_*.log"), reverse=True)  # Newest first
    for old_log in existing_logs[KEEP_SESSION_LOGS - 1:]:
        try:
            old_log.unlink()
        except OSError:
            pass  # Another process may have removed it


def setup_logging(
    log_file: Optional[str] = "logs/blogsearch.log",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG
) -> Optional[Path]:
    """
    Configure the root logger.

    - Console: brief logs (INFO by default)
    - File: detailed logs (DEBUG by default), one timestamped file per
      session, rotated at 10MB; the last 5 sessions are kept

    Args:
        log_file: Base path of the log file, None for console only
        console_level: Console logging level
        file_level: File logging level

    Returns:
        Path of this session's log file, or None without file logging
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture everything, filter in handlers

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger.addHandler(console_handler)

    # Suppress noisy third-party loggers in console
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    if not log_file:
        logging.info(f"Logging configured: console={logging.getLevelName(console_level)}, no log file")
        return None

    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    _remove_old_sessions(log_path)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    session_log = log_path.parent / f"{log_path.stem}_{timestamp}.log"

    file_handler = RotatingFileHandler(
        session_log,
        mode='a',
        maxBytes=10*1024*1024,  # 10MB
        backupCount=10,
        encoding='utf-8'
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    root_logger.addHandler(file_handler)

    logging.info(f"Logging configured: console={logging.getLevelName(console_level)}, file={session_log} ({logging.getLevelName(file_level)})")
    return session_log
