"""Simple CLI to validate the database connection.

This adapter is meant for local operations: it instantiates the concrete
database adapter from the infrastructure layer and runs a basic health
check against the wealth records database.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.db import dispose_wealth_engine
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run a basic connectivity check against the configured database."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    try:
        engine = adapter.get_engine()
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    logger.info(f"Wealth DB: {engine.url}")
    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")

    logger.info("Connection is working.")
    dispose_wealth_engine()


if __name__ == "__main__":  # pragma: no cover
    main()
