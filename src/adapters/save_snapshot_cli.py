"""CLI adapter storing today's net worth snapshot."""

import argparse
from datetime import date

from src.application.use_cases.save_net_worth_snapshot import (
    SaveNetWorthSnapshotUseCase,
)
from src.infrastructure.container import (
    build_database_adapter,
    build_market_data,
    build_records_repository,
    build_settings,
    build_snapshot_repository,
)
from src.infrastructure.logging.logger import get_app_logger


def main(argv: list[str] | None = None) -> None:
    """Compute and store the net worth snapshot."""
    parser = argparse.ArgumentParser(
        description="Store the consolidated net worth for a day."
    )
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Snapshot date (YYYY-MM-DD), today by default.",
    )
    args = parser.parse_args(argv)
    logger = get_app_logger()
    settings = build_settings()

    try:
        db_adapter = build_database_adapter()
        snapshot_repository = build_snapshot_repository(db_adapter)
        snapshot_repository.prepare()
        use_case = SaveNetWorthSnapshotUseCase(
            records_repository=build_records_repository(db_adapter),
            market_data=build_market_data(db_adapter, settings),
            snapshot_repository=snapshot_repository,
            logger=logger,
            reference_currency=settings.reference_currency,
        )
        snapshot = use_case.execute(snapshot_date=args.date)
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    print(
        f"Saved snapshot for {snapshot.snapshot_date.isoformat()}: "
        f"net worth {snapshot.net_worth:,.2f} {snapshot.currency_code}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
