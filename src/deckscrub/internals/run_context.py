"""Process-global execution context management.

Manages two levels of tracking IDs:
- session_id: Generated once per app startup (entire GUI session or CLI invocation)
- cleanup_run_id: Generated fresh for each cleanup run (one CLI run, or one GUI menu click)
"""

from __future__ import annotations

import os
import threading
import uuid

# Module-level state; None means "not yet generated"
_session_id: str | None = None

# Regenerated on every cleanup run, which can happen many times in one GUI session.
_cleanup_run_id: str | None = None

_session_lock = threading.Lock()
_cleanup_lock = threading.Lock()


# region get_session_id
def get_session_id() -> str:
    """
    Return the process-global session ID, generating it if necessary.

    Resolution order:
    1. Environment variable `DECKSCRUB_SESSION_ID`, so CI jobs and tests can
       correlate logs with a known value.
    2. Fresh random 8-character hex string.
    """
    global _session_id

    # Fast path: skip the lock once the ID exists.
    if _session_id is None:
        with _session_lock:
            # Another thread may have generated it while we waited on the lock.
            if _session_id is None:
                _session_id = (
                    os.environ.get("DECKSCRUB_SESSION_ID") or uuid.uuid4().hex[:8]
                )
    return _session_id


# endregion


# region start_cleanup_run
def start_cleanup_run() -> str:
    """
    Generate and set a fresh cleanup run ID.

    Call at the start of each cleanup run. Always overwrites any previous ID.
    """
    global _cleanup_run_id

    with _cleanup_lock:
        _cleanup_run_id = uuid.uuid4().hex[:8]

    return _cleanup_run_id


# endregion


# region get_cleanup_run_id
def get_cleanup_run_id() -> str:
    """
    Return the current cleanup run ID, or "Unknown" if no run has started yet.
    """
    # Read by the log filter on every record, so this must not log itself.
    if _cleanup_run_id is None:
        return "Unknown"
    return _cleanup_run_id


# endregion
