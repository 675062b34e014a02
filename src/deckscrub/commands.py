"""The command table: every cleanup a user can pick from the menu or the CLI.

Each command is a plain function of the open document that returns a count. The
table pairs it with its menu label and the messages shown when it finishes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from deckscrub.document import PresentationDocument
from deckscrub.internals.config.define_config import CommandId
from deckscrub.internals.constants import DEFAULT_COMMENT_PAGE_SIZE
from deckscrub.processing.comments import CommentStore, purge_comments
from deckscrub.processing.notes import clear_speaker_notes
from deckscrub.processing.off_canvas import remove_off_canvas_elements

log = logging.getLogger("deckscrub")


# region CleanupSummary
@dataclass(frozen=True)
class CleanupSummary:
    """What one command did, and the message to show the user about it."""

    command_id: CommandId
    count: int
    message: str


# endregion


# region CleanupCommand
@dataclass(frozen=True)
class CleanupCommand:
    """One entry in the command table."""

    command_id: CommandId
    label: str
    run: Callable[[PresentationDocument], int]
    found_message: str  # formatted with {count}
    empty_message: str

    def summarize(self, count: int) -> CleanupSummary:
        message = self.found_message.format(count=count) if count else self.empty_message
        return CleanupSummary(self.command_id, count, message)


# endregion


# region build_command_table
def build_command_table(
    comment_store: CommentStore,
    comment_page_size: int = DEFAULT_COMMENT_PAGE_SIZE,
) -> dict[CommandId, CleanupCommand]:
    """Build the command table, in menu order."""

    def _purge(document: PresentationDocument) -> int:
        return purge_comments(comment_store, document.id, comment_page_size)

    commands = [
        CleanupCommand(
            command_id=CommandId.REMOVE_COMMENTS,
            label="Delete all comments",
            run=_purge,
            found_message="Deleted {count} comment(s).",
            empty_message="No comments found.",
        ),
        CleanupCommand(
            command_id=CommandId.CLEAR_SPEAKER_NOTES,
            label="Clear all speaker notes",
            run=clear_speaker_notes,
            found_message="Cleared speaker notes on {count} slide(s).",
            empty_message="No speaker notes found.",
        ),
        CleanupCommand(
            command_id=CommandId.REMOVE_OFF_CANVAS_ELEMENTS,
            label="Remove off-canvas elements",
            run=remove_off_canvas_elements,
            found_message="Removed {count} off-canvas element(s).",
            empty_message="No off-canvas elements found.",
        ),
    ]
    return {command.command_id: command for command in commands}


# endregion


# region run_command
def run_command(
    table: dict[CommandId, CleanupCommand],
    command_id: CommandId | str,
    document: PresentationDocument,
) -> CleanupSummary:
    """Run one command against the document and summarize the result."""
    if not isinstance(command_id, CommandId):
        command_id = CommandId.from_string(command_id)

    command = table.get(command_id)
    if command is None:
        log.error(f"Command {command_id.value!r} is not in the command table.")
        raise ValueError(f"Unknown command: {command_id.value}")

    log.info(f"Running '{command.label}' on {document.id}")
    try:
        count = command.run(document)
    except Exception:
        log.error(f"'{command.label}' failed on {document.id}; stopping this command.")
        raise

    summary = command.summarize(count)
    log.info(summary.message)
    return summary


# endregion
