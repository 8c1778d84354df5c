#!/usr/bin/env python3
"""
Reformat a webDiplomacy adjudication report.
Parses the report and prints every order in canonical form, newest round first.
"""

import sys
import logging
import argparse
from typing import List, Optional

from diplomacy_report.config import load_settings
from diplomacy_report.parsing.errors import ParseError, TrailingContentError
from diplomacy_report.parsing.structure import parse_game
from diplomacy_report.rendering.text_renderer import render_game
from diplomacy_report.io.yaml_writer import ReportWriter

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_INPUT_ERROR = 2
EXIT_OUTPUT_ERROR = 3


def configure_logging(level: int) -> None:
    """Log to stderr so stdout only carries the report."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def read_report(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def build_parser(default_input: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Reformat a webDiplomacy adjudication report, newest round first'
    )
    parser.add_argument('input', nargs='?', default=default_input,
                        help=f"Report file, or '-' for stdin (default: {default_input})")
    parser.add_argument('-o', '--output',
                        help='Write the reformatted report here instead of stdout')
    parser.add_argument('--yaml', dest='yaml_path',
                        help='Also save the parsed report as YAML to this path')
    strictness = parser.add_mutually_exclusive_group()
    strictness.add_argument('--lenient', dest='lenient', action='store_true', default=None,
                            help='Warn about unparsed trailing text instead of failing')
    strictness.add_argument('--strict', dest='lenient', action='store_false',
                            help='Fail on unparsed trailing text (overrides DIPLOMACY_REPORT_LENIENT)')
    parser.add_argument('--log-level',
                        help='Logging level (default: INFO)')
    parser.set_defaults(lenient=None)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    settings = load_settings()
    args = build_parser(settings.input_path).parse_args(argv)

    if args.log_level:
        settings.log_level = args.log_level
    if args.lenient is not None:
        settings.lenient = args.lenient

    try:
        configure_logging(settings.log_level_value)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    try:
        text = read_report(args.input)
    except OSError as e:
        logger.error(f"Cannot read report {args.input}: {e}")
        return EXIT_INPUT_ERROR

    if not text.strip():
        logger.error(f"No report content in {args.input}")
        return EXIT_INPUT_ERROR

    try:
        game = parse_game(text, strict=not settings.lenient)
    except TrailingContentError as e:
        logger.error(f"Report only partly parsed: {e}")
        return EXIT_PARSE_ERROR
    except ParseError as e:
        logger.error(f"Could not parse report: {e}")
        return EXIT_PARSE_ERROR

    output = render_game(game)
    if args.output:
        try:
            with open(args.output, 'w', encoding='utf-8') as f:
                f.write(output)
        except OSError as e:
            logger.error(f"Cannot write report {args.output}: {e}")
            return EXIT_OUTPUT_ERROR
        logger.info(f"Wrote reformatted report to {args.output}")
    else:
        sys.stdout.write(output)

    if args.yaml_path:
        try:
            ReportWriter.save_to_yaml(game, args.yaml_path)
        except OSError as e:
            logger.error(f"Cannot write YAML {args.yaml_path}: {e}")
            return EXIT_OUTPUT_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
