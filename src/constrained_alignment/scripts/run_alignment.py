"""
Command-line interface for constrained alignment.
"""

import sys
import json
import argparse

from ..config.config_loader import load_config
from ..core.exceptions import AlignmentError, ConfigError
from ..diagnostics.validation import validate_configuration
from ..pipeline.main_pipeline import run_alignment, run_merge, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='constrained-align',
        description="Fit a source string onto the shape of a reference string, "
                    "or merge wildcard readings of the same string",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Fit a short reading onto a longer reference
  %(prog)s align aabcd aaabbbccd

  # Merge partially known readings
  %(prog)s merge "*12*bc777*" "a1***b771*" "a2**bc77*7" "*3**c*77**"

  # Other options
  %(prog)s --config my_config.yaml --gap-penalty -2 --json align abc abcd
        """
    )

    parser.add_argument(
        '--config',
        type=str,
        help='Path to configuration YAML file'
    )

    parser.add_argument(
        '--gap-penalty',
        type=int,
        help='Linear gap penalty (negative integer)'
    )

    parser.add_argument(
        '--placeholder',
        type=str,
        help='Character emitted where no source character fits'
    )

    parser.add_argument(
        '--wildcard',
        type=str,
        help='Wildcard character used in merge templates'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the result as JSON'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    align_parser = subparsers.add_parser('align', help='Align SOURCE onto REFERENCE')
    align_parser.add_argument('source', type=str)
    align_parser.add_argument('reference', type=str)

    merge_parser = subparsers.add_parser('merge', help='Merge wildcard templates')
    merge_parser.add_argument('templates', nargs='+', type=str)

    return parser


def build_overrides(args: argparse.Namespace) -> dict:
    overrides = {}

    if args.gap_penalty is not None:
        overrides.setdefault('alignment', {})['gap_penalty'] = args.gap_penalty

    if args.placeholder is not None:
        overrides.setdefault('alignment', {})['placeholder'] = args.placeholder

    if args.wildcard is not None:
        overrides.setdefault('alignment', {})['wildcard'] = args.wildcard

    if args.debug:
        overrides.setdefault('debug', {})['log_level'] = 'DEBUG'

    return overrides


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config, overrides=build_overrides(args))
    except (OSError, ConfigError) as e:
        print(f"ERROR: Could not load configuration: {e}", file=sys.stderr)
        return 1

    is_valid, errors = validate_configuration(config)
    if not is_valid:
        for error in errors:
            print(f"ERROR: {error}", file=sys.stderr)
        return 1

    logger = setup_logging(config)

    try:
        if args.command == 'align':
            result = run_alignment(args.source, args.reference, config)
            output = result['aligned']
        else:
            result = run_merge(args.templates, config)
            output = result['merged']
    except AlignmentError as e:
        logger.error(f"Alignment failed: {e}")
        if args.debug:
            logger.exception("Traceback")
        return 1

    if args.json:
        print(json.dumps(result, indent=2))
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
