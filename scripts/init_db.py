#!/usr/bin/env python3
"""
Standalone database initialization script
Creates the meal table on the database configured by DATABASE_URL
"""

import argparse
import logging
import sys
import os

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from domain.models import engine, init_database

logger = logging.getLogger("mealstreak.scripts.init_db")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create the MealStreak schema")
    parser.add_argument(
        "--echo", action="store_true", help="Log every SQL statement issued"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )
    if args.echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)

    logger.info(
        f"Initializing schema on {engine.url.render_as_string(hide_password=True)}"
    )
    try:
        init_database()
    except SQLAlchemyError as e:
        logger.error(f"Schema creation failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("MealStreak Database Initialization")
    print("=" * 60 + "\n")

    exit_code = main()

    if exit_code == 0:
        print("\nSUCCESS! The meal table is ready to use.\n")
    else:
        print("\nFAILED! Check the errors above.\n")

    sys.exit(exit_code)
