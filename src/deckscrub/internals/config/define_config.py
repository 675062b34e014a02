# internals/config/define_config.py
"""User configuration dataclass and validation."""

# region imports
from __future__ import annotations

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    # Python 3.10
    import tomli as tomllib  # type: ignore[no-redef]

import logging
from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import tomli_w  # For writing (no stdlib equivalent yet)

from deckscrub.internals.constants import DEFAULT_COMMENT_PAGE_SIZE
from deckscrub.internals.paths import normalize_path, resolve_path, user_output_dir

# endregion

log = logging.getLogger("deckscrub")


# region Enums
class CommandId(Enum):
    """Cleanup commands, in the order they appear in the Cleanup menu."""

    REMOVE_COMMENTS = "remove-comments"
    CLEAR_SPEAKER_NOTES = "clear-speaker-notes"
    REMOVE_OFF_CANVAS_ELEMENTS = "remove-off-canvas-elements"

    @classmethod
    def from_string(cls, value: str) -> "CommandId":
        """Convert string to CommandId, with support for aliases."""
        value = value.lower().strip().replace("_", "-")

        aliases = {
            "comments": cls.REMOVE_COMMENTS,
            "notes": cls.CLEAR_SPEAKER_NOTES,
            "off-canvas": cls.REMOVE_OFF_CANVAS_ELEMENTS,
            # New aliases must also be added to the CLI --command choices.
        }

        if value in aliases:
            return aliases[value]

        for member in cls:
            if member.value == value:
                return member

        valid_values = [m.value for m in cls] + list(aliases.keys())
        raise ValueError(
            f"'{value}' is not a valid CommandId. Valid options: {', '.join(valid_values)}"
        )


# endregion


# region class UserConfig
@dataclass
class UserConfig:
    """All user-configurable settings for a deckscrub cleanup run."""

    # region class fields

    # region Input/Output
    input_pptx: Optional[Path] = None

    output_folder: Optional[Path] = None  # Where cleaned copies are saved

    # Overwrite the input file instead of saving a timestamped copy to output_folder.
    in_place: bool = False
    # endregion

    # region Processing options
    comment_page_size: int = DEFAULT_COMMENT_PAGE_SIZE

    # Run in list order.
    commands: list[CommandId] = field(default_factory=list)
    # endregion

    # endregion

    # region post_init
    def __post_init__(self) -> None:
        """Convert string inputs of path fields into Path objects, and command strings into CommandIds."""
        if self.input_pptx is not None:
            self.input_pptx = Path(self.input_pptx)
        if self.output_folder is not None:
            self.output_folder = Path(self.output_folder)
        self.commands = [
            c if isinstance(c, CommandId) else CommandId.from_string(c)
            for c in self.commands
        ]

    # endregion

    # region from_toml
    @classmethod
    def from_toml(cls, path: Path) -> UserConfig:
        """
        Load configuration from a TOML file.

        The TOML file should have flat key-value pairs matching the UserConfig field names.

        Example TOML:
            input_pptx = "~/talk.pptx"
            commands = ["remove-comments", "clear-speaker-notes"]
            in_place = false
            comment_page_size = 50

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If TOML is invalid or contains invalid command names
        """
        path = Path(path)
        if not path.exists():
            error_msg = f"Config file not found: {path}"
            log.error(error_msg)
            raise FileNotFoundError(error_msg)
        if path.is_dir():
            error_msg = f"This is a directory (folder), not a toml file: {path}"
            log.error(error_msg)
            raise ValueError(error_msg)

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            error_msg = f"Invalid TOML syntax in {path}. Check for missing or mismatched quote marks."
            log.error(error_msg)
            raise ValueError(error_msg) from e
        except PermissionError as e:
            error_msg = f"We hit a permission error when trying to access {path}"
            log.error(error_msg)
            raise ValueError(error_msg) from e

        # Only warn; an empty file means "all defaults".
        if not data:
            log.warning(
                f"Config toml file loaded as empty, so no UserConfig fields were set from: {path}."
            )

        valid_fields = {f.name for f in fields(cls)}
        unexpected = set(data.keys()) - valid_fields

        if unexpected:
            log.warning(
                f"Ignoring unexpected fields in TOML config: {', '.join(sorted(unexpected))}. "
                f"Check for typos. Valid fields: {', '.join(sorted(valid_fields))}"
            )
            data = {k: v for k, v in data.items() if k in valid_fields}

        if "commands" in data:
            raw_commands = data["commands"]
            if isinstance(raw_commands, str):
                raw_commands = [raw_commands]
            try:
                data["commands"] = [CommandId.from_string(c) for c in raw_commands]
            except (ValueError, AttributeError) as e:
                error_msg = (
                    f"Invalid commands: {data['commands']!r}. "
                    f"Valid options: {[c.value for c in CommandId]}"
                )
                log.error(error_msg)
                raise ValueError(error_msg) from e

        return cls(**data)

    # endregion

    # region instance getters
    def get_input_pptx_file(self) -> Path | None:
        """Get the input pptx file path, or None if not specified."""
        if self.input_pptx:
            return resolve_path(self.input_pptx)

        return None

    def get_output_folder(self) -> Path:
        """Get the output folder for cleaned copies, with fallback to default."""
        if self.output_folder:
            return resolve_path(self.output_folder)

        return user_output_dir()

    # endregion

    # region save_toml
    def save_toml(self, path: Path) -> None:
        """
        Save configuration to a TOML file.

        Args:
            path: Where to save the .toml file
        """
        path = Path(path)

        if path.exists() and path.is_dir():
            error_msg = f"Cannot save config: path is a directory, not a file: {path}."
            log.error(error_msg)
            raise ValueError(error_msg)

        path.parent.mkdir(parents=True, exist_ok=True)

        data: dict[str, Any] = {
            "input_pptx": normalize_path(
                str(self.input_pptx) if self.input_pptx else None
            ),
            "output_folder": normalize_path(
                str(self.output_folder) if self.output_folder else None
            ),
            "in_place": self.in_place,
            "comment_page_size": self.comment_page_size,
            "commands": [c.value for c in self.commands],
        }

        # TOML can't serialize None
        data = {k: v for k, v in data.items() if v is not None}

        try:
            with open(path, "wb") as f:
                tomli_w.dump(data, f)
        except PermissionError as e:
            error_msg = f"Permission denied writing to: {path}"
            log.error(error_msg)
            raise PermissionError(error_msg) from e
        except OSError as e:
            error_msg = f"Failed to write config file to {path}"
            log.error(error_msg)
            raise OSError(error_msg) from e

        log.info(f"Saved config to {path}")

    # endregion

    # region validate
    def validate(self) -> None:
        """
        Validate intrinsic config values (no filesystem access).

        Catches:
            - Someone accidentally passing wrong types
            - Empty strings where None is expected
            - Page sizes that could never make progress
        """
        if not isinstance(self.in_place, bool):
            raise ValueError(
                f"in_place must be a boolean, got {type(self.in_place).__name__}"
            )

        # bool is an int subclass; True is not a page size.
        if isinstance(self.comment_page_size, bool) or not isinstance(
            self.comment_page_size, int
        ):
            raise ValueError(
                f"comment_page_size must be an integer, got {type(self.comment_page_size).__name__}"
            )
        if self.comment_page_size < 1:
            raise ValueError(
                f"comment_page_size must be at least 1, got {self.comment_page_size}"
            )

        for command in self.commands:
            if not isinstance(command, CommandId):
                raise ValueError(
                    f"commands must contain CommandId values, got {type(command).__name__}. "
                    f"Valid values: {[c.value for c in CommandId]}"
                )

        if self.output_folder is not None and str(self.output_folder) == "":
            raise ValueError(
                "output_folder cannot be empty string; use None for default"
            )

    # endregion

    # region validate_cleanup_requirements
    def validate_cleanup_requirements(self) -> None:
        """
        Validate external state required for a cleanup run: the input exists, at least one
        command was requested, and the output folder is usable.
        """
        input_path = self.get_input_pptx_file()

        if input_path is None:
            raise ValueError(
                "No input pptx file specified. Please set input_pptx before running a cleanup."
            )
        if not input_path.exists():
            raise FileNotFoundError(f"Input pptx not found: {input_path}")
        if not input_path.is_file():
            raise ValueError(f"Not a file: {input_path}")

        if not self.commands:
            raise ValueError(
                "No cleanup commands selected. "
                f"Choose at least one of: {[c.value for c in CommandId]}"
            )

        if not self.in_place:
            output_folder = self.get_output_folder()
            if output_folder.exists() and not output_folder.is_dir():
                raise ValueError(
                    f"Output path exists but is not a directory: {output_folder}"
                )

    # endregion


# endregion
