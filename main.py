#!/usr/bin/env python3
"""
Character Browser - Main entry point
"""
import argparse
import logging
import sys
from pathlib import Path

from simple_logger import Slogger
from character_browser.config import load_config, validate_config
from character_browser.errors import ConfigError
from character_browser.ui.app import CharacterBrowserApp

logger = logging.getLogger("character_browser.main")


def setup_logging_config(log_level_str: str, log_file_path: Path):
    """Send stdlib logging to a file; the terminal belongs to the UI."""
    numeric_log_level = getattr(logging, log_level_str.upper(), logging.INFO)
    log_file_path.parent.mkdir(parents=True, exist_ok=True)
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(
        level=numeric_log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.FileHandler(log_file_path, mode='a')]
    )
    logger.info(f"Logging configured. Level: {log_level_str}. File: {log_file_path}")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse a paginated remote character collection.")
    parser.add_argument("--base-url", help="Collection endpoint (overrides config and CHARACTER_API_URL)")
    parser.add_argument("--page", type=int, help="Page to start on (default 1)")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        config = load_config()
        if args.base_url:
            config["api"]["base_url"] = args.base_url
        if args.page is not None:
            config["pagination"]["start_page"] = args.page
        if args.log_level:
            config["logging"]["level"] = args.log_level
        validate_config(config)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    log_cfg = config["logging"]
    setup_logging_config(log_cfg["level"], Path(log_cfg["file"]))
    Slogger.configure(log_path=log_cfg["file"], min_level=log_cfg["level"])
    Slogger.info("Starting Character Browser...", {"base_url": config["api"]["base_url"]})

    app = CharacterBrowserApp(config)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
