"""CLI adapter creating the finance tables.

This module wires the schema helper to the concrete database adapter and
provides a command-line entry point for preparing a fresh database.
"""

from finance_tracker.infrastructure.container import build_database_adapter
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.infrastructure.schema import ensure_schema


def main() -> None:
    """Create any missing finance table."""
    logger = get_app_logger()
    db_adapter = build_database_adapter()

    table_count = ensure_schema(db_adapter, logger=logger)

    print(f"Ensured {table_count} tables in the finance database.")


if __name__ == "__main__":  # pragma: no cover
    main()
