"""Unified logging configuration for colour_delta.

The library itself never configures handlers; it only asks for named loggers
and emits DEBUG records (clamped inputs) and INFO records (config loads).
Applications embedding the library call setup_logging() once.

Public API:
    setup_logging(log_level="DEBUG", context={"app": "palette-dedupe"})
    get_logger(name)
    push_context(palette="brand")
    pop_context(keys=["palette"])
    set_level("WARNING")
    shutdown()

Format examples:
    Human: 2026-10-19T09:15:02.120Z | DEBUG    | app=palette-dedupe | red value 300 outside [0, 255], clamped to 255
    JSON:  {"t":"2026-10-19T09:15:02.120000+00:00","lvl":"DEBUG","name":"colour_delta.utils.compute","msg":"..."}

Context uses contextvars, so fields pushed in one thread never leak into
another. Repeated setup_logging() calls replace handlers instead of stacking
them.
"""

import contextvars
import json
import logging
import logging.handlers
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional


_context_var = contextvars.ContextVar('colour_delta_log_context', default={})

# Handlers installed by the last setup_logging() call
_installed_handlers: List[logging.Handler] = []

_LEVEL_COLORS = {
    'DEBUG': '\033[36m',
    'INFO': '\033[32m',
    'WARNING': '\033[33m',
    'ERROR': '\033[31m',
    'CRITICAL': '\033[35m',
}
_RESET = '\033[0m'


class ContextFormatter(logging.Formatter):
    """Formatter that appends fields from push_context().

    fmt_mode is "human" (pipe-separated, optional ANSI level colours) or
    "json" (one object per line).
    """

    def __init__(self, fmt_mode: str = "human", use_color: bool = True, tz: str = "UTC"):
        super().__init__()
        if fmt_mode not in ("human", "json"):
            raise ValueError(f"Unknown format mode: {fmt_mode}. Use 'human' or 'json'.")
        self.fmt_mode = fmt_mode
        self.use_color = use_color and sys.stderr.isatty()
        self.tz = tz

    def format(self, record: logging.LogRecord) -> str:
        context = _context_var.get({})
        if self.tz == "UTC":
            ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        else:
            ts = datetime.fromtimestamp(record.created)

        if self.fmt_mode == "json":
            payload = {
                't': ts.isoformat(),
                'lvl': record.levelname,
                'name': record.name,
                'pid': os.getpid(),
                'msg': record.getMessage(),
            }
            payload.update(context)
            if record.exc_info:
                payload['exc'] = self.formatException(record.exc_info)
            return json.dumps(payload, default=str)

        level = f"{record.levelname:8s}"
        if self.use_color:
            level = f"{_LEVEL_COLORS.get(record.levelname, '')}{level}{_RESET}"

        parts = [ts.strftime('%Y-%m-%dT%H:%M:%S.%f')[:-3] + 'Z', '|', level, '|']
        if context:
            parts.extend([' '.join(f"{k}={v}" for k, v in context.items()), '|'])
        parts.append(record.getMessage())

        line = ' '.join(parts)
        if record.exc_info:
            line += '\n' + self.formatException(record.exc_info)
        return line


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    *,
    json: bool = False,
    color: bool = True,
    to_stderr: bool = True,
    rotate: Optional[Dict[str, Any]] = None,
    tz: str = "UTC",
    capture_warnings: bool = True,
    quiet_libs: Optional[List[str]] = None,
    context: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """Configure root logger (idempotent).

    Parameters
    ----------
    log_level : str
        "DEBUG", "INFO", "WARNING", "ERROR" or "CRITICAL"
    log_file : str, optional
        Log file path; None for no file logging
    json : bool
        JSON lines in the file handler, default False
    color : bool
        ANSI colours on the console handler, default True
    to_stderr : bool
        Log to stderr, default True
    rotate : dict, optional
        {"mode": "size", "max_bytes": ..., "backup_count": ...} or
        {"mode": "time", "when": "D", "interval": 1, "backup_count": ...}
    tz : str
        "UTC" (default) or "local"
    capture_warnings : bool
        Route Python warnings into logging, default True
    quiet_libs : list[str], optional
        Logger names forced to WARNING (e.g. ["torch"])
    context : dict, optional
        Initial contextual fields

    Returns
    -------
    dict
        {"handlers": [...]} for the handlers installed on the root logger

    Raises
    ------
    ValueError
        If log_level or rotation mode is unknown
    """
    global _installed_handlers

    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    root = logging.getLogger()
    for handler in _installed_handlers:
        root.removeHandler(handler)
        handler.close()
    _installed_handlers = []
    root.setLevel(level)

    handlers = []
    if to_stderr:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(ContextFormatter("human", color, tz))
        handlers.append(console)
    if log_file:
        handlers.append(_create_file_handler(log_file, rotate, json, tz))
    for handler in handlers:
        root.addHandler(handler)

    if context:
        push_context(**context)

    for lib in quiet_libs or []:
        logging.getLogger(lib).setLevel(logging.WARNING)

    if capture_warnings:
        logging.captureWarnings(True)

    _installed_handlers = handlers
    return {'handlers': handlers}


def _create_file_handler(
    log_file: str,
    rotate: Optional[Dict[str, Any]],
    json_format: bool,
    tz: str
) -> logging.Handler:
    """Create file handler with optional rotation."""
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    if not rotate:
        handler = logging.FileHandler(log_file, encoding='utf-8')
    elif rotate.get('mode', 'size') == 'size':
        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=rotate.get('max_bytes', 10_000_000),
            backupCount=rotate.get('backup_count', 3),
            encoding='utf-8'
        )
    elif rotate['mode'] == 'time':
        handler = logging.handlers.TimedRotatingFileHandler(
            log_file,
            when=rotate.get('when', 'D'),
            interval=rotate.get('interval', 1),
            backupCount=rotate.get('backup_count', 7),
            encoding='utf-8'
        )
    else:
        raise ValueError(f"Unknown rotation mode: {rotate['mode']}. Use 'size' or 'time'.")

    handler.setFormatter(ContextFormatter("json" if json_format else "human", use_color=False, tz=tz))
    return handler


def get_logger(name: str) -> logging.Logger:
    """Get logger by name (typically __name__)."""
    return logging.getLogger(name)


def set_level(level: str) -> None:
    """Update root logger level at runtime."""
    value = getattr(logging, level.upper(), None)
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    logging.getLogger().setLevel(value)


def push_context(**kwargs) -> None:
    """Add contextual fields to all subsequent log records in this context.

    Examples
    --------
    >>> push_context(palette="brand")
    >>> get_logger("demo").info("deduplicating")  # → "... | palette=brand | deduplicating"
    """
    _context_var.set({**_context_var.get({}), **kwargs})


def pop_context(keys: Optional[List[str]] = None) -> None:
    """Remove contextual fields; all of them when keys is None."""
    if keys is None:
        _context_var.set({})
        return
    current = dict(_context_var.get({}))
    for key in keys:
        current.pop(key, None)
    _context_var.set(current)


def shutdown() -> None:
    """Flush, close and detach the handlers installed by setup_logging().

    Handlers added by the host application are left alone.
    """
    global _installed_handlers

    root = logging.getLogger()
    for handler in _installed_handlers:
        handler.flush()
        root.removeHandler(handler)
        handler.close()
    _installed_handlers = []
