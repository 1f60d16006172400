"""Create the report tables on the configured database."""

import logging

from community_reports.core.settings import settings
from community_reports.db.session import create_tables

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Initialize the database by creating all tables."""
    create_tables()
    logger.info("Created tables on %s", settings.effective_database_url)


def main() -> None:
    logging.basicConfig(level=settings.log_level.upper())
    init_db()
    print("Database initialized.")


if __name__ == "__main__":
    main()
