"""Logging configuration for the image migrator"""

import logging
from pathlib import Path
from logging.handlers import RotatingFileHandler


class ProjectOnlyFilter(logging.Filter):
    """Filter to only allow logs from image_migrator.* modules"""

    def filter(self, record):
        return record.name.startswith('image_migrator')


def setup_logging(log_dir: Path | str, level: str = "INFO") -> None:
    """Setup logging for a migration run

    Creates three log files in ``log_dir``:
    - debug.log: DEBUG+ logs from image_migrator.* modules only
    - migrate.log: ``level``+ logs from all modules
    - error.log: ERROR+ logs from all modules (failed downloads and inserts)

    ``level``+ logs are also written to the console.

    Files rotate at 10 MB, keeping 5 backups.

    Args:
        log_dir: Directory for log files (created if missing)
        level: Level name for migrate.log and the console
    """
    if isinstance(log_dir, str):
        log_dir = Path(log_dir)
    level = level.upper()
    log_dir.mkdir(parents=True, exist_ok=True)

    log_format = '%(asctime)s.%(msecs)03d - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
    date_format = '%Y-%m-%d %H:%M:%S'
    formatter = logging.Formatter(log_format, datefmt=date_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Clear existing handlers to avoid duplicate logs
    root_logger.handlers.clear()

    debug_handler = RotatingFileHandler(
        log_dir / "debug.log",
        maxBytes=10*1024*1024,
        backupCount=5,
        encoding='utf-8'
    )
    debug_handler.setLevel(logging.DEBUG)
    debug_handler.setFormatter(formatter)
    debug_handler.addFilter(ProjectOnlyFilter())
    root_logger.addHandler(debug_handler)

    info_handler = RotatingFileHandler(
        log_dir / "migrate.log",
        maxBytes=10*1024*1024,
        backupCount=5,
        encoding='utf-8'
    )
    info_handler.setLevel(level)
    info_handler.setFormatter(formatter)
    root_logger.addHandler(info_handler)

    error_handler = RotatingFileHandler(
        log_dir / "error.log",
        maxBytes=10*1024*1024,
        backupCount=5,
        encoding='utf-8'
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(formatter)
    root_logger.addHandler(error_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging initialized in {log_dir}")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
