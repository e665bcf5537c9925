"""
Logging setup with contextvars-based metadata injection.

- Adds load_tag and document source into every log line (via contextvars).
- Supports console-only logging OR console + rotating file logs.
"""

import contextvars
import hashlib
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Context variables for dynamic log metadata
cv_load_tag = contextvars.ContextVar("load_tag", default="-")
cv_source = contextvars.ContextVar("source", default="-")


def make_load_tag(load_id_full: str, length: int = 8) -> str:
    """
    Stable short tag derived from the full load id.
    Uses BLAKE2s for collision resistance.
    """
    h = hashlib.blake2s(load_id_full.encode("utf-8"), digest_size=8).hexdigest()
    return h[:length]


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.load = cv_load_tag.get() or "-"
        record.source = cv_source.get() or "-"
        return True


def set_log_context(
    *,
    load_id_full: str | None = None,
    source: str | Path | None = None,
) -> None:
    """Update logging context (thread-safe via contextvars)."""
    if load_id_full is not None:
        cv_load_tag.set(make_load_tag(str(load_id_full)))

    if source is not None:
        cv_source.set(Path(source).name or str(source))


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 5_000_000,  # 5MB
    backup_count: int = 3,
) -> None:
    """
    Configure application logging with contextvars support.

    Args:
        log_file: Path to log file (console only when None)
        console_level: Minimum level for console output (default: INFO)
        file_level: Minimum level for file output (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
    """
    # Clear existing handlers to avoid duplicate logs if called multiple times
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # keep root permissive; handlers enforce levels

    console_fmt = "%(asctime)s [%(levelname)s] l=%(load)s src=%(source)s | %(message)s"
    file_fmt = "%(asctime)s [%(levelname)s] %(name)s | l=%(load)s src=%(source)s | %(message)s"

    ctx_filter = ContextInjectFilter()

    # Console handler (human-readable)
    ch = logging.StreamHandler()
    ch.setLevel(console_level)
    ch.setFormatter(logging.Formatter(console_fmt, datefmt="%H:%M:%S"))
    ch.addFilter(ctx_filter)
    root.addHandler(ch)

    # File handler (detailed, with rotation)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(file_fmt, datefmt="%Y-%m-%d %H:%M:%S"))
        fh.addFilter(ctx_filter)
        root.addHandler(fh)

    logging.getLogger(__name__).info(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        str(log_file) if log_file is not None else "None",
    )
