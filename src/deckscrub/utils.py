"""Small helpers shared by the CLI, the GUI and startup."""

import io
import logging
import os
import platform
import sys

from deckscrub.internals import constants

log = logging.getLogger("deckscrub")

# Environment variable that turns on the trace log
DEBUG_ENV_VAR = "DECKSCRUB_DEBUG"

_TRUE_STRINGS = {"true", "t", "1", "yes", "y"}
_FALSE_STRINGS = {"false", "f", "0", "no", "n"}


def setup_console_encoding() -> None:
    """Deck names and slide text are often non-ASCII; make the Windows console print UTF-8."""
    if platform.system() == "Windows":
        sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8")


def get_debug_mode() -> bool:
    """Debug mode from DECKSCRUB_DEBUG if it holds a boolean, else DEBUG_MODE_DEFAULT."""
    raw = os.environ.get(DEBUG_ENV_VAR)
    if raw is None:
        return constants.DEBUG_MODE_DEFAULT

    try:
        return str_to_bool(raw)
    except ValueError:
        log.warning(
            f"Warning: Invalid value for {DEBUG_ENV_VAR} env var: '{raw}'. Using default."
        )
        return constants.DEBUG_MODE_DEFAULT


def str_to_bool(value: str) -> bool:
    """Parse "true"/"yes"/"1" and "false"/"no"/"0" (any case, surrounding whitespace ignored)."""
    normalized = value.strip().lower()
    if normalized in _TRUE_STRINGS:
        return True
    if normalized in _FALSE_STRINGS:
        return False

    log.warning(f"{value} is not a valid boolean value.")
    raise ValueError(f"{value} is not a valid boolean value.")
