"""CLI Interface Logic (argparse etc)"""

import argparse
import logging
import sys
from dataclasses import fields
from pathlib import Path

from deckscrub.commands import build_command_table
from deckscrub.document import PptxDocumentSource
from deckscrub.internals.config.define_config import CommandId, UserConfig
from deckscrub.orchestrator import run_cleanup
from deckscrub.processing.comments import PptxCommentStore

log = logging.getLogger("deckscrub")

# Aliases accepted by CommandId.from_string()
_COMMAND_ALIASES = ["comments", "notes", "off-canvas"]


def run() -> None:
    """Run CLI interface. Assumes startup.initialize_application() was already called."""

    args = parse_args()

    if args.list_commands:
        print_command_list()
        return

    # CLI args > config file > defaults
    cfg = build_config_from_args(args)

    if args.save_config:
        cfg.save_toml(Path(args.save_config))

    result = run_cleanup(cfg)
    for summary in result.summaries:
        print(summary.message)
    print(f"Saved: {result.output_path}")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Returns argparse.Namespace with all the UserConfig fields as attributes.
    Validates that all config fields have corresponding CLI arguments.
    """
    parser = argparse.ArgumentParser(
        prog="deckscrub",
        description="Remove review comments, speaker notes, and off-canvas elements from PowerPoint pptx decks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Strip comments and notes, saving a timestamped copy to the output folder
  deckscrub --cli --input-pptx talk.pptx --command comments --command notes

  # Remove everything parked outside the slide canvas, overwriting the input
  deckscrub --cli --input-pptx talk.pptx --command off-canvas --in-place

  # Use config file, overriding one setting
  deckscrub --cli --config cleanup.toml --output-folder ~/Desktop

  # Remember this run's settings for next time
  deckscrub --cli --input-pptx talk.pptx --command notes --save-config cleanup.toml
        """,
    )

    # Routing flag read by __main__; accepted here so parsing doesn't choke on it.
    parser.add_argument("--cli", action="store_true", help=argparse.SUPPRESS)

    parser.add_argument(
        "--list-commands",
        action="store_true",
        dest="list_commands",
        help="List the available cleanup commands and exit.",
    )

    # Config file (special - loads other values)
    parser.add_argument(
        "--config",
        type=str,
        metavar="PATH",
        help="Path to TOML configuration file for a cleanup run.",
    )
    parser.add_argument(
        "--save-config",
        type=str,
        dest="save_config",
        metavar="PATH",
        help="Save the resolved settings to a TOML file (reusable with --config), then run.",
    )

    # Input/Output
    parser.add_argument(
        "--input-pptx",
        type=str,
        dest="input_pptx",
        metavar="PATH",
        help="PowerPoint file to clean up (.pptx file)",
    )
    parser.add_argument(
        "--output-folder",
        type=str,
        dest="output_folder",
        metavar="PATH",
        help="Folder for the cleaned copy (default: ~/Documents/deckscrub/output)",
    )

    in_place_group = parser.add_mutually_exclusive_group()
    in_place_group.add_argument(
        "--in-place",
        action="store_true",
        dest="in_place",
        help="Overwrite the input file instead of saving a cleaned copy",
    )
    in_place_group.add_argument(
        "--no-in-place",
        action="store_false",
        dest="in_place",
        help="Save a timestamped cleaned copy (default)",
    )

    # Processing options
    parser.add_argument(
        "--command",
        action="append",
        dest="commands",
        choices=[c.value for c in CommandId] + _COMMAND_ALIASES,
        help="Cleanup to run; repeat to run several, in order.",
    )
    parser.add_argument(
        "--comment-page-size",
        type=int,
        dest="comment_page_size",
        metavar="N",
        help="How many comments to list per request while purging (default: 100)",
    )

    # Leave booleans as None unless a flag was given, so config file values survive.
    parser.set_defaults(in_place=None)

    _validate_args_match_config(parser)

    return parser.parse_args(argv)


def build_config_from_args(args: argparse.Namespace) -> UserConfig:
    """
    Build UserConfig from parsed arguments with proper priority.

    Priority order (highest to lowest):
    1. CLI arguments (if explicitly provided)
    2. Config file values (if --config provided)
    3. UserConfig defaults
    """
    if args.config:
        config_path = Path(args.config)
        log.info(f"Loading config from {config_path}")
        cfg = UserConfig.from_toml(config_path)
    else:
        cfg = UserConfig()

    if args.input_pptx is not None:
        cfg.input_pptx = Path(args.input_pptx)
    if args.output_folder is not None:
        cfg.output_folder = Path(args.output_folder)
    if args.in_place is not None:
        cfg.in_place = args.in_place
    if args.comment_page_size is not None:
        cfg.comment_page_size = args.comment_page_size
    if args.commands:
        cfg.commands = [CommandId.from_string(c) for c in args.commands]

    cfg.validate()

    return cfg


def print_command_list() -> None:
    """Print each command id with its menu label."""
    table = build_command_table(PptxCommentStore(PptxDocumentSource()))
    for command in table.values():
        print(f"{command.command_id.value:<28} {command.label}")


def _validate_args_match_config(parser: argparse.ArgumentParser) -> None:
    """
    Ensure all UserConfig fields have corresponding CLI arguments, and vice versa.

    Raises:
        RuntimeError: If there's a mismatch between config fields and CLI args
    """
    config_fields = {f.name for f in fields(UserConfig)}

    excluded_args = ["help", "config", "save_config", "cli", "list_commands"]
    arg_names = {
        action.dest for action in parser._actions if action.dest not in excluded_args
    }

    missing_in_args = config_fields - arg_names
    extra_in_args = arg_names - config_fields

    if missing_in_args:
        log.error(
            "UserConfig fields must have corresponding arg added to cli.parse_args() to ensure parity between interfaces."
        )
        raise RuntimeError(
            f"CLI arguments missing for UserConfig fields: {missing_in_args}\n"
            "These config fields need corresponding arguments added to parse_args()"
        )

    if extra_in_args:
        log.error(
            "We detected CLI args that do not match UserConfig fields. New args must either have a "
            "matching UserConfig field, or be added to excluded_args in _validate_args_match_config()."
        )
        raise RuntimeError(
            f"CLI arguments don't match UserConfig fields: {extra_in_args}\n"
            "Either remove these CLI args or add corresponding fields to UserConfig"
        )


def main() -> None:
    """Development entry point - run CLI directly with `python -m deckscrub.cli`"""
    from deckscrub import startup

    log = startup.initialize_application()
    try:
        run()
    except Exception:
        log.exception("Fatal error in CLI")
        sys.exit(1)


if __name__ == "__main__":
    main()
