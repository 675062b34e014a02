"""Run the cleanup commands a config asks for, then save the deck."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from deckscrub import io
from deckscrub.commands import CleanupSummary, build_command_table, run_command
from deckscrub.document import PptxDocumentSource
from deckscrub.internals.config.define_config import UserConfig
from deckscrub.internals.run_context import get_session_id, start_cleanup_run
from deckscrub.processing.comments import PptxCommentStore

log = logging.getLogger("deckscrub")


# region CleanupResult
@dataclass
class CleanupResult:
    """Where the cleaned deck went and what each command did."""

    output_path: Path
    summaries: list[CleanupSummary] = field(default_factory=list)


# endregion


# region run_cleanup
def run_cleanup(cfg: UserConfig) -> CleanupResult:
    """Validate the config, run each requested command in order, and save the result."""

    cfg.validate()
    cfg.validate_cleanup_requirements()

    run_id = start_cleanup_run()
    log.info("Initializing cleanup run.")
    log_run_info(cfg, run_id)

    input_path = cfg.get_input_pptx_file()
    # Safety check
    if input_path is None:
        raise ValueError(
            "input_pptx is None inside run_cleanup(), somehow. "
            "validate_cleanup_requirements() should have caught a missing input file."
        )

    source = PptxDocumentSource()
    document = source.open(input_path)
    table = build_command_table(PptxCommentStore(source), cfg.comment_page_size)

    summaries = []
    for command_id in cfg.commands:
        summaries.append(run_command(table, command_id, document))

    if cfg.in_place:
        output_path = source.save(document)
    else:
        output_path = source.save(
            document, io.build_output_path(input_path, cfg.get_output_folder())
        )

    log.info(f"Cleanup run {run_id} complete")
    log.info(f"  Original: {input_path}")
    log.info(f"  -> Final:  {output_path}")
    return CleanupResult(output_path=output_path, summaries=summaries)


# endregion


# region log_run_info
def log_run_info(cfg: UserConfig, run_id: str) -> None:
    """Write this run's ids and config to the log."""
    log.info("=== Cleanup Run Started ===")
    log.info(f"Run ID: {run_id}")
    log.info(f"Session ID: {get_session_id()}")
    log.info(f"Input: {cfg.input_pptx}")
    log.info(f"Commands: {[c.value for c in cfg.commands]}")
    log.info(f"Configuration: {cfg}")


# endregion
