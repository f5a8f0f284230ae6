"""
Centralized logging configuration for the listing feed.

setup_logging configures the root logger once with:
- Console output (DEBUG when verbose, INFO otherwise)
- Optional file output to logs/{service_name}.log (or CATALOG_LOG_DIRECTORY),
  truncated on each start unless CATALOG_LOG_APPEND is true
"""

import logging
import sys
import threading
from pathlib import Path
from typing import Optional

from .config import CatalogEnvironment

_config_lock = threading.Lock()
_LOG_FORMAT = "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_console_handler(verbose: bool) -> logging.Handler:
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    return console_handler


def _resolve_log_directory(env: CatalogEnvironment) -> Path:
    configured = env.text("LOG_DIRECTORY")
    if configured:
        return Path(configured).expanduser()
    return Path.cwd() / "logs"


def _configure_file_handler(service_name: Optional[str], env: CatalogEnvironment) -> Optional[logging.Handler]:
    if not service_name:
        return None

    logs_dir = _resolve_log_directory(env)
    logs_dir.mkdir(parents=True, exist_ok=True)
    file_mode = "a" if env.flag("LOG_APPEND") else "w"
    file_handler = logging.FileHandler(logs_dir / f"{service_name}.log", mode=file_mode)
    file_handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    file_handler.setLevel(logging.INFO)
    return file_handler


def _reset_root_handlers(root_logger: logging.Logger) -> None:
    for handler in list(root_logger.handlers):
        handler.close()
        root_logger.removeHandler(handler)


def _suppress_noisy_third_parties() -> None:
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("aiohttp").setLevel(logging.WARNING)


def setup_logging(service_name: Optional[str] = None, verbose: bool = False) -> None:
    """Configure logging for the application"""

    env = CatalogEnvironment()
    verbose = verbose or env.flag("VERBOSE")
    with _config_lock:
        root_logger = logging.getLogger()
        _reset_root_handlers(root_logger)

        root_logger.addHandler(_build_console_handler(verbose))
        file_handler = _configure_file_handler(service_name, env)
        if file_handler:
            root_logger.addHandler(file_handler)

        root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
        _suppress_noisy_third_parties()


__all__ = ["setup_logging"]
