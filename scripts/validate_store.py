"""
Validate the curated interaction data file.

Loads the store exactly as the service does at startup (shape checks, food
key uniqueness, alias collision check) and prints a summary.

Usage:
    python scripts/validate_store.py [PATH]
"""
import argparse
import sys
from pathlib import Path

from loguru import logger

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from interaction_checker.exceptions import StoreLoadError
from interaction_checker.store import load_store
from interaction_checker.utils.config_manager import ConfigManager


def main():
    parser = argparse.ArgumentParser(description="Validate curated interaction data")
    parser.add_argument("path", nargs="?", type=Path, help="Curated JSON file (default: from config)")
    args = parser.parse_args()

    logger.remove()
    logger.add(sys.stderr, level="INFO")

    path = args.path or ConfigManager.from_default_path().store_path()

    try:
        store = load_store(path)
    except StoreLoadError as e:
        logger.error(f"INVALID: {e}")
        return 1

    logger.info(f"OK: {path}")
    logger.info(f"  Drugs:        {len(store)}")
    logger.info(f"  Interactions: {store.interaction_count}")
    logger.info(f"  Aliases:      {store.alias_count}")

    for entry in store:
        aliases = ", ".join(entry.aliases) or "-"
        logger.info(f"  {entry.key:<16} foods={len(entry.interactions):<3} aliases={aliases}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
