"""
CLI -- Print categorized symbol lists for PHP files

Reads PHP files (or directories of them), categorizes their declarations
and prints one JSON object to stdout:

    {"path/to/file.php": {"classes": [...], "interfaces": [...],
                          "functions": [...], "traits": [...],
                          "constants": [...]}}

Nothing is written to disk.
"""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import ConfigManager
from .errors import ScoperExcludesError
from .excludes import ExcludesGenerator
from .logging_config import get_logger, setup_logging

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scoper-excludes",
        description="scoper-excludes -- List declared PHP symbols for php-scoper excludes",
    )
    parser.add_argument(
        'paths',
        nargs='+',
        type=Path,
        help='PHP files or directories to scan'
    )
    parser.add_argument(
        '--project', '-p',
        default=os.environ.get("SCOPER_EXCLUDES_PROJECT_PATH", "."),
        help='Project directory holding scoper-excludes.yaml (default: current)'
    )
    parser.add_argument(
        '--reset-interfaces',
        action='store_true',
        help='Clear interface names between files as well'
    )
    parser.add_argument(
        '--compact',
        action='store_true',
        help='Single-line JSON output'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging on stderr'
    )
    parser.add_argument(
        '--version', '-V',
        action='version',
        version=f'scoper-excludes {__version__}'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the scoper-excludes CLI.

    Returns:
        Process exit code: 0 on success, 1 on any scoper-excludes error
    """
    args = build_parser().parse_args(argv)
    setup_logging(debug=True if args.debug else None)

    try:
        config = ConfigManager(Path(args.project)).load()
        if args.reset_interfaces:
            config.categorize.reset_interfaces = True

        generator = ExcludesGenerator(config)
        results = generator.from_paths(args.paths)
    except (ScoperExcludesError, OSError) as e:
        logger.debug("Categorization failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output = {str(path): lists.to_dict() for path, lists in results.items()}
    indent = None if args.compact else 2
    print(json.dumps(output, indent=indent, ensure_ascii=False))
    return 0


if __name__ == '__main__':
    sys.exit(main())
