"""Entry point: `deckscrub` (or `python -m deckscrub`).

    deckscrub                       desktop app
    deckscrub talk.pptx             desktop app with talk.pptx already open
    deckscrub --cli --input-pptx talk.pptx --command comments
"""

from __future__ import annotations

import sys

from deckscrub import startup
from deckscrub.cli import run as run_cli


def main() -> None:
    """Set up logging, then hand off to the CLI when --cli is given and to the GUI otherwise."""
    log = startup.initialize_application()

    try:
        if "--cli" in sys.argv:
            run_cli()
        else:
            # PySide6 is only imported when the GUI actually runs
            from deckscrub.gui import run as run_gui

            run_gui()
    except Exception:
        log.exception("Unhandled exception - program crashed.")
        raise


if __name__ == "__main__":
    main()
