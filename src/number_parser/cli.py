"""
Command-line interface for the number parser.

This module handles CLI argument parsing, logging configuration,
and user interaction.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from number_parser.config_models import NumberParserConfig
from number_parser.errors import NumberParserError
from number_parser.observability import LoggingHook
from number_parser.orchestrator import run
from number_parser.validators import load_config
from number_parser.writers import supported_formats

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)

# Options that consume the following argument as their value
_VALUE_OPTIONS = ("--config", "--out", "--log-level")
_FLAG_OPTIONS = ("--help",)


def _expand_option(arg: str) -> Optional[str]:
    """Return arg with an unambiguous long-option prefix spelled out,
    or None when arg is not a known option."""
    name, sep, value = arg.partition("=")
    if len(name) < 3 or not name.startswith("--"):
        return None
    matches = [opt for opt in _VALUE_OPTIONS + _FLAG_OPTIONS if opt.startswith(name)]
    if len(matches) != 1:
        return None
    return matches[0] + sep + value


def _split_argv(argv: Sequence[str]) -> List[str]:
    """Move known options ahead of a '--' so that tokens such as "-5,3"
    are always taken as positionals."""
    options: List[str] = []
    positionals: List[str] = []
    remaining = iter(argv)
    for arg in remaining:
        if arg == "--":
            positionals.extend(remaining)
            break
        if arg == "-h":
            options.append(arg)
            continue
        option = _expand_option(arg)
        if option is None:
            positionals.append(arg)
        elif option in _VALUE_OPTIONS:
            options.append(option)
            value = next(remaining, None)
            if value is not None:
                options.append(value)
        else:
            options.append(option)
    return options + ["--"] + positionals


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="number-parser",
        allow_abbrev=False,
        description="Sort integers in descending order and persist them as "
                    + ", ".join(supported_formats()),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Write output.json containing [9,5,3,1]
  number-parser 5,3,9,1 json

  # Write output.xml into ./out
  number-parser --out ./out 5,-3,9 XML

  # No positional arguments: prompt for "<numbers> <format>"
  number-parser
        """
    )
    parser.add_argument("tokens", nargs="*",
                        help="Comma-separated numbers followed by the output format; extras are ignored")
    parser.add_argument("--config", type=Path, help="Config JSON file")
    parser.add_argument("--out", type=Path, help="Output directory (overrides config output_dir)")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point.

    Returns:
        Exit code: 0 = success or usage shown, 1 = error
    """
    parser = build_parser()
    args = parser.parse_args(_split_argv(sys.argv[1:] if argv is None else argv))
    logging.getLogger().setLevel(args.log_level)

    try:
        config = load_config(args.config) if args.config else NumberParserConfig()
        if args.out is not None:
            config = config.model_copy(update={"output_dir": args.out})

        run(args.tokens, config=config, hooks=[LoggingHook()])
        return 0

    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except NumberParserError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Validation error: {e}")
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
