# catalog/config/logging_config.py

"""Logging for the catalog: one file per run plus an optional console.

Every CLI command is its own run, so old ``run_*.log`` files are pruned
down to ``Settings.LOG_KEEP`` on each start.  The TUI passes
``console=False`` because stderr output would draw over the screen.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from catalog.config.settings import Settings

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | "
    "%(message)s"
)
_CONSOLE_FORMAT = "%(levelname)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _prune_old_runs(logs_dir: Path, keep: int) -> int:
    """Delete all but the *keep* newest run files; return how many went."""
    runs = sorted(logs_dir.glob("run_*.log"), reverse=True)
    stale = runs[keep:] if keep > 0 else runs
    for path in stale:
        path.unlink(missing_ok=True)
    return len(stale)


def _existing_log_file(logger: logging.Logger) -> Path | None:
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler):
            return Path(handler.baseFilename)
    return None


def setup_logging(console: bool = True) -> Path:
    """Attach the run-file handler (and a stderr handler) to ``catalog``.

    Safe to call more than once: later calls return the file already in
    use instead of opening another.
    """
    catalog_logger = logging.getLogger("catalog")
    catalog_logger.setLevel(logging.DEBUG)

    current = _existing_log_file(catalog_logger)
    if current is not None:
        return current

    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)
    # Leave room for the file about to be created
    pruned = _prune_old_runs(logs_dir, Settings.LOG_KEEP - 1)

    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = logs_dir / f"run_{stamp}.log"

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT)
    )
    catalog_logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        level = logging.getLevelName(Settings.LOG_LEVEL.upper())
        console_handler.setLevel(
            level if isinstance(level, int) else logging.WARNING
        )
        console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
        catalog_logger.addHandler(console_handler)

    catalog_logger.info(
        "Logging to %s (pruned %d old run files)", log_file, pruned,
    )
    return log_file
