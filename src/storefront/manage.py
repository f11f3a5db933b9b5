"""Storefront database management CLI.

Usage:
    python -m storefront.manage setup-db            # Create the orders table
    python -m storefront.manage drop-db             # Drop the orders table
    python -m storefront.manage seed                # Insert sample orders into an empty ledger
    python -m storefront.manage backfill-statuses   # Set the default status where it is missing
"""

import argparse
import asyncio

from storefront.ordering.order.maintenance import normalize_statuses
from storefront.ordering.order.numbering import generator_for
from storefront.ordering.order.seeding import seed_orders_if_empty
from storefront.ordering.storage.store import OrderStore
from storefront.shared.config import Settings, get_settings


async def setup_database(store: OrderStore, settings: Settings) -> None:  # noqa: ARG001
    print("Creating orders schema...")
    await store.create_schema()
    print("  orders schema ready.")


async def drop_database(store: OrderStore, settings: Settings) -> None:  # noqa: ARG001
    print("Dropping orders schema...")
    await store.drop_schema()
    print("  orders schema dropped.")


async def seed_database(store: OrderStore, settings: Settings) -> None:
    await store.create_schema()
    inserted = await seed_orders_if_empty(store, generator_for(settings.order_number_strategy))
    if inserted:
        print(f"Inserted {inserted} sample orders.")
    else:
        print("Orders already present; nothing seeded.")


async def backfill_statuses(store: OrderStore, settings: Settings) -> None:  # noqa: ARG001
    updated = await normalize_statuses(store)
    print(f"Backfilled status on {updated} orders.")


COMMANDS = {
    "setup-db": (setup_database, "Create the orders table"),
    "drop-db": (drop_database, "Drop the orders table"),
    "seed": (seed_database, "Insert sample orders if the ledger is empty"),
    "backfill-statuses": (backfill_statuses, "Set the default status on orders without one"),
}


async def run(command: str, settings: Settings) -> None:
    handler, _ = COMMANDS[command]
    store = OrderStore(settings.database_url, echo=settings.sql_echo)
    try:
        await handler(store, settings)
    finally:
        await store.dispose()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Storefront database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in COMMANDS.items():
        subparsers.add_parser(name, help=help_text)

    parser.add_argument("--database-url", help="Override STOREFRONT_DATABASE_URL")
    args = parser.parse_args(argv)

    settings = get_settings()
    if args.database_url:
        settings = settings.model_copy(update={"database_url": args.database_url})

    asyncio.run(run(args.command, settings))
    print("Done.")


if __name__ == "__main__":
    main()
