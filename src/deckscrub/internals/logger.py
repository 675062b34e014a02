"""
Logging setup for deckscrub.

Every line carries the cleanup run it belongs to (`[cleanup:<id>]`, or `Unknown`
before the first run starts) and the session it came from (`[session:<id>]`), so one
GUI session's log can be split into its individual cleanups.
"""

import logging

from deckscrub.internals.paths import user_log_dir_path
from deckscrub.internals.run_context import get_cleanup_run_id, get_session_id


class CleanupRunFilter(logging.Filter):
    """Stamps each record with the cleanup run id that is current when it is logged."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.cleanup_run_id = get_cleanup_run_id()
        return True


def setup_logger(
    name: str = "deckscrub",
    level: int = logging.DEBUG,
    enable_trace: bool = False,
) -> logging.Logger:
    """
    Attach console, file and (optionally) trace handlers to the deckscrub logger.

    Safe to call more than once; a logger that already has handlers is returned as is.

    Example:
        >>> log = setup_logger()
        >>> log.info("Removed 2 off-canvas element(s)")
        2025-01-09 14:23:45 [INFO] Removed 2 off-canvas element(s) [cleanup:a1b2c3d4] [session:9f8e7d6c]
    """

    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(level)
    # Keep our lines out of the root logger so other libraries' logs don't mix in.
    logger.propagate = False

    session_id = get_session_id()
    run_filter = CleanupRunFilter()

    formatter = logging.Formatter(
        f"%(asctime)s [%(levelname)s] %(message)s [cleanup:%(cleanup_run_id)s] [session:{session_id}]",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(run_filter)
    logger.addHandler(console_handler)

    # ~/Documents/deckscrub/logs/deckscrub.log gets everything
    log_file = user_log_dir_path() / "deckscrub.log"
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    file_handler.addFilter(run_filter)
    logger.addHandler(file_handler)

    if enable_trace:
        trace_formatter = logging.Formatter(
            "%(filename)s: %(funcName)s(), Line: %(lineno)d: - [%(levelname)s] %(asctime)s"
            f" - %(message)s -- [cleanup:%(cleanup_run_id)s] [session:{session_id}]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        trace_handler = logging.FileHandler(
            user_log_dir_path() / "trace_deckscrub.log", encoding="utf-8"
        )
        trace_handler.setLevel(logging.DEBUG)
        trace_handler.setFormatter(trace_formatter)
        trace_handler.addFilter(run_filter)
        logger.addHandler(trace_handler)

    logger.info(f"Logger initialized. Writing to {log_file}")

    return logger
