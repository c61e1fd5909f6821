# rcconfig — (c) 2025 rtj.dev LLC — MIT Licensed
"""Logging setup for programs that resolve their options with rcconfig."""
from __future__ import annotations

import logging
import os
from pathlib import Path

import pythonjsonlogger.json
from rich.logging import RichHandler

from rcconfig.logger import logger

LOG_MODE_ENV_VAR = "RCCONFIG_LOG_MODE"
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")


def running_in_container() -> bool:
    try:
        content = Path("/proc/1/cgroup").read_text(encoding="UTF-8")
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def _file_handler(path: str, as_json: bool) -> logging.Handler:
    handler = logging.FileHandler(path, "a", "UTF-8")
    if as_json:
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Route rc file diagnostics to the console and optionally a log file.

    `mode` is "cli" for rich console output or "json" for JSON lines. When it is not
    given, `$RCCONFIG_LOG_MODE` decides, then container detection.

    The `rcconfig` logger is set to the lowest level any handler accepts, so its
    debug messages (loaded arguments, bypassed files) are only produced when some
    handler will print them.

    Raises:
        ValueError: If `mode` is not "cli" or "json".
    """
    if not mode:
        mode = os.getenv(LOG_MODE_ENV_VAR) or (
            "json" if running_in_container() else "cli"
        )
    console_handler = _console_handler(mode)
    console_handler.setLevel(console_log_level)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    root.addHandler(console_handler)

    levels = [console_log_level]
    if log_filename:
        file_handler = _file_handler(log_filename, json_log_to_file)
        file_handler.setLevel(file_log_level)
        root.addHandler(file_handler)
        levels.append(file_log_level)

    logger.setLevel(min(levels))
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
