"""
Command-line entry point.

    atomicgen [--config FILE] [--root DIR] [--target NAME ...] [--check]

Exit status is 0 on success, 1 when generation fails or, with
``--check``, when any destination is out of date.
"""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .pipeline import run
from .utils.config import GeneratorConfig, set_config
from .utils.exceptions import AtomicGenError
from .utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="atomicgen",
        description="Regenerate Atomic wrapper sources and tests from templates",
    )
    parser.add_argument("--config", help="Configuration file (YAML or JSON)")
    parser.add_argument("--root", default=".", help="Directory destinations are written under")
    parser.add_argument(
        "--target",
        action="append",
        dest="targets",
        metavar="NAME",
        help="Generate only this target (repeatable)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Report out-of-date destinations without writing",
    )
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the atomicgen command."""
    args = build_parser().parse_args(argv)

    try:
        config = GeneratorConfig(args.config)
        log_file = config.logging.log_file if config.logging.enable_file_logging else None
        setup_logging(args.log_level or config.logging.level, log_file)
        set_config(config)

        results = run(config, root=args.root, targets=args.targets, check=args.check)
    except AtomicGenError as e:
        logger.error(str(e))
        return 1

    if args.check:
        stale = [r.name for r in results if not r.up_to_date]
        if stale:
            logger.error(f"Out of date: {', '.join(stale)}")
            return 1
        logger.info("All targets up to date")
        return 0

    written = sum(1 for r in results if r.written)
    logger.info(f"{written} of {len(results)} targets written")
    return 0


if __name__ == "__main__":
    sys.exit(main())
