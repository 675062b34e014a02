"""File I/O operations for pptx files."""

import logging
from datetime import datetime
from pathlib import Path

import pptx
from pptx import presentation

from deckscrub.internals import constants

log = logging.getLogger("deckscrub")


# region Path Helpers
def validate_path(user_path: str | Path) -> Path:
    """Ensure filepath exists and is a file."""
    path = Path(user_path)
    if not path.exists():
        log.error(f"File not found: {user_path}")
        raise FileNotFoundError(f"File not found: {user_path}")
    if not path.is_file():
        log.error(f"Path is not a file (might be a directory): {user_path}")
        raise ValueError(f"Path is not a file: {user_path}")
    return path


def validate_pptx_path(user_path: str | Path) -> Path:
    """Validates the filepath exists and is actually a pptx file."""
    path = validate_path(user_path)

    if path.suffix.lower() == ".ppt":
        log.error(f"Unsupported .ppt file: {path}")
        raise ValueError(
            "This tool only supports .pptx files right now. Please convert your .ppt file to .pptx format first."
        )
    if path.suffix.lower() != ".pptx":
        log.error(f"Wrong file extension: expected .pptx, got {path.suffix}")
        raise ValueError(f"Expected a .pptx file, but got: {path.suffix}")
    return path


def build_output_path(input_path: Path, output_folder: Path) -> Path:
    """Apply the cleaned suffix and a per-run timestamp to the input's filename."""
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    filename = f"{input_path.stem}{constants.OUTPUT_FILENAME_SUFFIX}_{timestamp}.pptx"
    return output_folder / filename


# endregion


# region Disk I/O - Read & Validate
def load_and_validate_pptx(pptx_path: Path | str) -> presentation.Presentation:
    """Read in pptx file contents and report what we found."""
    path = validate_pptx_path(pptx_path)

    try:
        prs = pptx.Presentation(str(path))
    except Exception as e:
        log.error(f"Could not load PowerPoint file {path}. Error: {e}")
        raise ValueError(f"Presentation appears to be corrupted: {e}") from e

    slide_count = len(prs.slides)
    if slide_count == 0:
        # Not an error: every cleanup just reports nothing found.
        log.warning(f"The pptx file {path} contains no slides.")
    else:
        log.info(f"The pptx file {path} has {slide_count} slide(s) in it.")

    return prs


# endregion


# region Disk I/O - Write
def save_output(prs: presentation.Presentation, output_path: Path) -> Path:
    """Save the presentation to output_path, creating the parent folder if needed."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        prs.save(str(output_path))
        log.info(f"Successfully saved to {output_path}.")
    except PermissionError as e:
        log.error(f"Save failed due to permission error: {e}")
        raise PermissionError(
            "Save failed: File may be open in another program"
        ) from e
    except OSError as e:
        log.error(f"Save failed: {e}")
        raise OSError(f"Save failed (disk space or IO issue): {e}") from e

    return output_path


# endregion
