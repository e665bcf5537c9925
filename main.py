"""
CLI entrypoint for the Bloom verb explorer.

This script performs the following steps:
- loads .env (if present) and configs/explorer.yaml
- configures logging (console + optional rotating file)
- loads and normalizes the verbs document into a catalog
- runs one query: verb search, entry selection, format browse, or the level hierarchy
- prints the result as JSON
- optionally saves the level coverage table as CSV
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from application import (
    CatalogSession,
    browse_format,
    browse_hierarchy,
    dumps,
    search_verbs,
    select_verb,
    summarize_groups,
)
from application.constants import COVERAGE_FILENAME
from domain.catalog import compute_level_coverage_table_and_save
from domain.errors import CatalogLoadError
from infrastructure.config import load_explorer_config
from infrastructure.constants import EXPLORER_CONFIG_FILE
from infrastructure.io import ensure_exists
from infrastructure.observability import configure_logging

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Query a Bloom's-taxonomy verbs document")
    p.add_argument(
        "--config",
        type=str,
        default=None,
        help=f"Path to explorer.yaml (default: {EXPLORER_CONFIG_FILE} if it exists)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to .env file, loaded when present (default: .env)",
    )
    p.add_argument("--data", type=str, default=None, help="Verbs document; overrides the config.")

    query = p.add_mutually_exclusive_group()
    query.add_argument("--verb", type=str, help="Search entries by exact verb text.")
    query.add_argument("--verb-id", type=str, help="Show the detail of one entry.")
    query.add_argument("--format", type=str, dest="format_id", help="Browse entries mapped to a format.")

    p.add_argument("--level", type=str, default=None, help="Level in view when showing a detail (--verb-id).")
    p.add_argument("--coverage", action="store_true", help="Save the level coverage table as CSV.")
    p.add_argument(
        "--console-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level (default: from config)",
    )
    p.add_argument("--log-file", type=str, default=None, help="Rotating log file (default: from config)")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    config_path: Path | None = Path(args.config) if args.config else None
    if config_path is not None:
        ensure_exists(config_path, "explorer.yaml")
    elif EXPLORER_CONFIG_FILE.exists():
        config_path = EXPLORER_CONFIG_FILE

    cfg = load_explorer_config(config_path)

    log_file = Path(args.log_file) if args.log_file else cfg.logging.log_file
    configure_logging(
        log_file=log_file,
        console_level=getattr(logging, args.console_level) if args.console_level else cfg.logging.console_level_no,
        file_level=cfg.logging.file_level_no,
    )

    data_path = Path(args.data) if args.data else cfg.data_path
    ensure_exists(data_path, "verbs document")

    session = CatalogSession(settings=cfg.catalog)
    try:
        catalog = session.load_file(data_path)
    except CatalogLoadError as e:
        logger.error("Data could not be loaded: %s", e)
        return 1

    if args.verb is not None:
        result = search_verbs(catalog, args.verb)
        logger.info("Search %r: %s (%d matches)", result.query, result.status.value, len(result.matches))
        print(dumps(result))
    elif args.verb_id is not None:
        try:
            detail = select_verb(catalog, args.verb_id, args.level)
        except KeyError as e:
            logger.error("%s", e.args[0] if e.args else e)
            return 1
        print(dumps(detail))
    elif args.format_id is not None:
        browsed = browse_format(catalog, args.format_id)
        payload = browsed.model_dump(mode="json", exclude={"groups"})
        payload["groups"] = summarize_groups(browsed.groups)
        print(dumps(payload))
    else:
        print(dumps(summarize_groups(browse_hierarchy(catalog))))

    if args.coverage:
        out_path = compute_level_coverage_table_and_save(catalog, cfg.output_dir, COVERAGE_FILENAME)
        logger.info("Saved level coverage table to %s", out_path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
