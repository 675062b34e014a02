"""Startup logic needed by both CLI and GUI interfaces before anything else happens.

Handles common setup tasks required by both interfaces:
- Logging configuration
- Some CLI-specific setup that is harmless to GUI (console encoding setup)
"""

import logging
import sys

from deckscrub.internals.logger import setup_logger
from deckscrub.utils import get_debug_mode, setup_console_encoding


# region initialize_application
def initialize_application() -> logging.Logger:
    """Common startup tasks for both CLI and GUI."""

    # Must run before any console output, including the logger's.
    setup_console_encoding()

    try:
        log = setup_logger(enable_trace=_should_enable_trace_on_startup())
    except PermissionError as e:
        print(
            f"Cannot create log files: {e}\nCheck permissions on your Documents folder.",
            file=sys.stderr,
        )
        sys.exit(1)
    except OSError as e:
        print(
            f"Cannot create log files: {e}\nCheck available disk space and that your Documents folder exists.",
            file=sys.stderr,
        )
        sys.exit(1)

    log.info("Starting deckscrub Log.")
    return log


# endregion


# region _should_enable_trace_on_startup
def _should_enable_trace_on_startup() -> bool:
    """
    Determine if trace logging should start immediately based on Debug Mode switch.

    Checks:
    - Environment variable (DECKSCRUB_DEBUG)
    - System default (DEBUG_MODE_DEFAULT in constants.py)
    """
    return get_debug_mode()


# endregion
