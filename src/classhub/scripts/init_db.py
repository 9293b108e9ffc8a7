"""Create the ClassHub tables in the configured database."""
from __future__ import annotations

import argparse
import logging

from classhub.core.logging import configure_logging
from classhub.core.settings import settings
from classhub.db.session import build_engine, create_tables, drop_tables

logger = logging.getLogger("classhub.scripts.init_db")


def main() -> None:
    parser = argparse.ArgumentParser(description="Create (or reset) the ClassHub schema")
    parser.add_argument(
        "--drop-tables",
        action="store_true",
        help="Drop every table before creating the schema.",
    )
    parser.add_argument(
        "--url",
        default=None,
        help="Override database URL (defaults to effective settings URL)",
    )
    args = parser.parse_args()

    configure_logging(settings.log_level)
    engine = build_engine(args.url) if args.url else None
    if args.drop_tables:
        drop_tables(engine)
        logger.info("Dropped all tables")
    create_tables(engine)
    logger.info("Schema ready")


if __name__ == "__main__":
    main()
