"""
Command-line interface for the bookmark shortcut generator.

This module reads a bookmarks file and writes it out as lf keybindings,
zsh named directories or shell cd aliases.
"""

import argparse
import logging
import sys

from bookmark_shortcuts import __version__
from bookmark_shortcuts.config.configuration import Configuration
from bookmark_shortcuts.core.bookmark_parser import BookmarkFileParser
from bookmark_shortcuts.core.exporters import get_exporter
from bookmark_shortcuts.utils.error_handler import BookmarkShortcutsError, UsageError
from bookmark_shortcuts.utils.logging_setup import setup_logging
from bookmark_shortcuts.utils.validation import (
    validate_config_file,
    validate_conflicting_arguments,
    validate_input_file,
    validate_output_file,
)

# (argparse dest, dialect key) for each output mode option
OUTPUT_MODES = (
    ("lf_file", "lf"),
    ("zsh_file", "zsh"),
    ("cd_alias_file", "cd-alias"),
)


class CLIInterface:
    """Command line interface for bookmark shortcut generation."""

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            prog="bookmark-shortcuts",
            description=(
                "Generate lf keybindings, zsh named directories or shell "
                "cd aliases from a bookmarks file"
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  bookmark-shortcuts --input ~/.bookmarks --lf ~/.config/lf/bookmarks
  bookmark-shortcuts -i ~/.bookmarks -z ~/.zsh_named_dirs
  bookmark-shortcuts -i ~/.bookmarks -c ~/.cd_aliases --verbose

Bookmarks file format:
  One bookmark per line: <shortcut> <path>
  Lines starting with '#' and blank lines are ignored.

    # downloads and desktop
    d ~/downloads
    D ~/desktop

Output:
  --lf        map gd cd ~/downloads
  --zsh       hash -d d=~/downloads
  --cd-alias  alias cdd="~/downloads"

Configuration:
  Optional TOML or JSON file passed with --config, or
  bookmark_shortcuts.toml in $XDG_CONFIG_HOME (default ~/.config).

  [parsing]
  encoding = "utf-8"
  on_malformed = "error"   # or "skip" to warn and continue

  [logging]
  level = "WARNING"
  log_file = ""
            """,
        )

        parser.add_argument(
            "--version", "-V", action="version", version=f"%(prog)s {__version__}"
        )

        parser.add_argument(
            "--input",
            "-i",
            required=True,
            help="Bookmarks file to read",
        )

        outputs = parser.add_argument_group(
            "output modes", "Exactly one output mode must be given"
        )
        modes = outputs.add_mutually_exclusive_group(required=True)
        modes.add_argument(
            "--lf",
            "-l",
            dest="lf_file",
            metavar="FILE",
            help="Write lf file-manager keybindings (map g<key> cd <path>)",
        )
        modes.add_argument(
            "--zsh",
            "-z",
            dest="zsh_file",
            metavar="FILE",
            help="Write zsh named directories (hash -d <key>=<path>)",
        )
        modes.add_argument(
            "--cd-alias",
            "-c",
            dest="cd_alias_file",
            metavar="FILE",
            help='Write shell cd aliases (alias cd<key>="<path>")',
        )

        parser.add_argument(
            "--config",
            help="Configuration file path (TOML or JSON format)",
        )
        parser.add_argument(
            "--verbose",
            "-v",
            action="store_true",
            help="Log progress information to stderr",
        )

        return parser

    def parse_args(self, args=None) -> argparse.Namespace:
        """Parse command line arguments."""
        return self.parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> dict:
        """
        Validate all arguments and return processed values.

        Args:
            args: Parsed arguments from argparse

        Returns:
            Dictionary of validated and processed arguments

        Raises:
            BookmarkShortcutsError: If any validation fails
        """
        selected = [
            (dialect, getattr(args, dest))
            for dest, dialect in OUTPUT_MODES
            if getattr(args, dest) is not None
        ]
        # argparse already enforces this for parsed command lines
        if len(selected) != 1:
            raise UsageError("Exactly one of --lf, --zsh or --cd-alias is required")
        dialect, output_file = selected[0]

        input_path = validate_input_file(args.input)
        output_path = validate_output_file(output_file)
        validate_conflicting_arguments(input_path, output_path)
        config_path = validate_config_file(args.config)

        return {
            "input_path": input_path,
            "output_path": output_path,
            "dialect": dialect,
            "config_path": config_path,
            "verbose": args.verbose,
        }

    def process_arguments(self, validated_args: dict) -> Configuration:
        """
        Load configuration and set up logging.

        Args:
            validated_args: Dictionary of validated arguments

        Returns:
            Configured Configuration object
        """
        config = Configuration(validated_args["config_path"])
        config.update_from_args(validated_args)
        setup_logging(config)
        return config

    def run(self, args=None) -> int:
        """Execute CLI interface."""
        logger = logging.getLogger(__name__)

        try:
            parsed_args = self.parse_args(args)
            validated_args = self.validate_args(parsed_args)
            config = self.process_arguments(validated_args)

            if config.source:
                logger.info(f"Configuration file: {config.source}")
            logger.info(f"Input file: {validated_args['input_path']}")
            logger.info(
                f"Output file: {validated_args['output_path']} "
                f"({validated_args['dialect']})"
            )

            parser = BookmarkFileParser(
                on_malformed=config.on_malformed, encoding=config.encoding
            )
            parse_result = parser.parse_file(validated_args["input_path"])
            logger.info(f"Shortcuts: {', '.join(parse_result.shortcuts())}")

            exporter = get_exporter(validated_args["dialect"])()
            result = exporter.export(
                parse_result.entries, validated_args["output_path"]
            )
            logger.info(f"Done: {result}")
            return 0

        except BookmarkShortcutsError as e:
            print(f"Error: {e}", file=sys.stderr)
            logger.debug("Run aborted", exc_info=True)
            return 1


def main(args=None):
    """Main entry point for the CLI."""
    cli = CLIInterface()
    return cli.run(args)


if __name__ == "__main__":
    sys.exit(main())
