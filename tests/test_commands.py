"""Tests for the command table and running commands against a document."""

import pytest

from deckscrub.commands import build_command_table, run_command
from deckscrub.document import PptxDocumentSource, PresentationDocument
from deckscrub.internals.config.define_config import CommandId
from deckscrub.processing.comments import PptxCommentStore


@pytest.fixture
def table(source: PptxDocumentSource) -> dict:
    return build_command_table(PptxCommentStore(source))


def test_table_lists_commands_in_menu_order(table: dict) -> None:
    assert list(table) == list(CommandId)
    assert [c.label for c in table.values()] == [
        "Delete all comments",
        "Clear all speaker notes",
        "Remove off-canvas elements",
    ]


@pytest.mark.parametrize(
    argnames="command_id,count,message",
    argvalues=[
        (CommandId.REMOVE_COMMENTS, 5, "Deleted 5 comment(s)."),
        (CommandId.CLEAR_SPEAKER_NOTES, 1, "Cleared speaker notes on 1 slide(s)."),
        (CommandId.REMOVE_OFF_CANVAS_ELEMENTS, 2, "Removed 2 off-canvas element(s)."),
    ],
)
def test_run_command_reports_count(
    table: dict,
    messy_document: PresentationDocument,
    command_id: CommandId,
    count: int,
    message: str,
) -> None:
    summary = run_command(table, command_id, messy_document)

    assert summary.command_id == command_id
    assert summary.count == count
    assert summary.message == message


@pytest.mark.parametrize(
    argnames="command_id,message",
    argvalues=[
        (CommandId.REMOVE_COMMENTS, "No comments found."),
        (CommandId.CLEAR_SPEAKER_NOTES, "No speaker notes found."),
        (CommandId.REMOVE_OFF_CANVAS_ELEMENTS, "No off-canvas elements found."),
    ],
)
def test_second_run_finds_nothing(
    table: dict,
    messy_document: PresentationDocument,
    command_id: CommandId,
    message: str,
) -> None:
    run_command(table, command_id, messy_document)

    summary = run_command(table, command_id, messy_document)

    assert summary.count == 0
    assert summary.message == message


def test_run_command_accepts_strings(
    table: dict, messy_document: PresentationDocument
) -> None:
    assert run_command(table, "notes", messy_document).count == 1


def test_run_command_rejects_unknown_string(
    table: dict, messy_document: PresentationDocument
) -> None:
    with pytest.raises(ValueError, match="not a valid CommandId"):
        run_command(table, "shrink-fonts", messy_document)


def test_run_command_rejects_command_missing_from_table(
    table: dict, messy_document: PresentationDocument
) -> None:
    del table[CommandId.CLEAR_SPEAKER_NOTES]

    with pytest.raises(ValueError, match="Unknown command"):
        run_command(table, CommandId.CLEAR_SPEAKER_NOTES, messy_document)


def test_run_command_propagates_failures(
    table: dict,
    messy_document: PresentationDocument,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    command = table[CommandId.REMOVE_OFF_CANVAS_ELEMENTS]

    def explode(document: PresentationDocument) -> int:
        raise RuntimeError("host refused the edit")

    monkeypatch.setitem(
        table,
        CommandId.REMOVE_OFF_CANVAS_ELEMENTS,
        type(command)(
            command.command_id,
            command.label,
            explode,
            command.found_message,
            command.empty_message,
        ),
    )

    with pytest.raises(RuntimeError, match="host refused"):
        run_command(table, CommandId.REMOVE_OFF_CANVAS_ELEMENTS, messy_document)

    assert "failed" in caplog.text


def test_comment_page_size_is_passed_to_the_store(
    messy_document: PresentationDocument, source: PptxDocumentSource
) -> None:
    calls: list[int] = []

    class RecordingStore(PptxCommentStore):
        def list(self, document_id, page_token, page_size):  # noqa: ANN001, ANN201
            calls.append(page_size)
            return super().list(document_id, page_token, page_size)

    table = build_command_table(RecordingStore(source), comment_page_size=2)

    assert run_command(table, CommandId.REMOVE_COMMENTS, messy_document).count == 5
    assert set(calls) == {2}
