"""Where deckscrub keeps its files on the user's machine.

Everything lives under one folder in the user's Documents (found with platformdirs,
so it lands in the right place on Windows, macOS and Linux):

    ~/Documents/deckscrub/logs/     deckscrub.log, trace_deckscrub.log
    ~/Documents/deckscrub/output/   cleaned copies, unless --output-folder says otherwise
"""

import os
from pathlib import Path

from platformdirs import user_documents_dir

PACKAGE_NAME = "deckscrub"


# region user folders
def _user_folder(*parts: str) -> Path:
    """~/Documents/deckscrub/<parts>, created on first use."""
    folder = Path(user_documents_dir(), PACKAGE_NAME, *parts)
    folder.mkdir(parents=True, exist_ok=True)
    return folder


def user_log_dir_path() -> Path:
    return _user_folder("logs")


def user_output_dir() -> Path:
    """Default destination for cleaned copies of a deck."""
    return _user_folder("output")


# endregion


# region path strings
def resolve_path(raw: str | Path) -> Path:
    """
    Turn a path typed by the user (CLI, TOML, file dialog) into an absolute Path.

    Expands ${VARS} and ~; relative paths are taken from the current working directory.
    """
    return Path(os.path.expandvars(str(raw))).expanduser().resolve()


def normalize_path(path_str: str | None) -> str | None:
    """Forward slashes only, so a saved config stays valid TOML and works on every OS."""
    return path_str.replace("\\", "/") if path_str else None


# endregion
