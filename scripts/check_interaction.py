"""
Check a food/drug pair from the command line.

Runs the same cascade as the HTTP API: curated store first, openFDA label
text search on a miss.

Usage:
    python scripts/check_interaction.py --food grapefruit --drug Coumadin [--json]
"""
import argparse
import json
import sys
from datetime import datetime
from pathlib import Path

from loguru import logger

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from interaction_checker.exceptions import StoreLoadError
from interaction_checker.matching import build_resolver
from interaction_checker.utils.config_manager import ConfigManager


def setup_logging(log_file: Path = None, verbose: bool = False):
    """Configure logging."""
    logger.remove()  # Remove default handler

    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level="DEBUG" if verbose else "WARNING",
    )

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            rotation="10 MB",
        )
        logger.info(f"Logging to {log_file}")


def print_result(payload: dict):
    """Print a result payload in a readable layout."""
    if "message" in payload:
        print(f"[{payload['source']}] {payload['message']}")
        return

    print(f"Source:         {payload['source']}")
    print(f"Drug / food:    {payload['drug']} / {payload['food']}")
    print(f"Severity:       {payload['severity']}")
    print(f"Effect:         {payload['effect']}")
    if payload["mechanism"]:
        print(f"Mechanism:      {payload['mechanism']}")
    print(f"Recommendation: {payload['recommendation']}")


def main():
    parser = argparse.ArgumentParser(description="Check a food/drug interaction")
    parser.add_argument("--food", required=True, help="Food name")
    parser.add_argument("--drug", required=True, help="Drug name or alias")
    parser.add_argument("--config", type=Path, help="Path to YAML config")
    parser.add_argument("--json", action="store_true", help="Print the raw JSON payload")
    parser.add_argument("--verbose", action="store_true", help="Debug logging to stderr")
    parser.add_argument(
        "--log-file",
        type=Path,
        help=f"Optional debug log file (e.g. logs/check_{datetime.now():%Y%m%d}.log)",
    )
    args = parser.parse_args()

    setup_logging(args.log_file, args.verbose)

    config = ConfigManager(args.config) if args.config else ConfigManager.from_default_path()

    try:
        resolver = build_resolver(config)
    except (StoreLoadError, ValueError) as e:
        logger.error(f"Cannot start: {e}")
        return 1

    result = resolver.check(args.food, args.drug)
    payload = result.to_dict()

    if args.json:
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        print_result(payload)

    return 2 if result.is_error else 0


if __name__ == "__main__":
    sys.exit(main())
