"""Integration tests for the database management CLI."""

import asyncio

import pytest

from storefront import manage
from storefront.ordering.storage.store import OrderStore


async def _count(database_url):
    store = OrderStore(database_url)
    try:
        return await store.count()
    finally:
        await store.dispose()


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path}/orders.db"


class TestManageCommands:
    def test_setup_then_seed(self, database_url, capsys):
        manage.main(["--database-url", database_url, "setup-db"])
        manage.main(["--database-url", database_url, "seed"])

        assert asyncio.run(_count(database_url)) == 3
        assert "Inserted 3 sample orders." in capsys.readouterr().out

    def test_seed_is_idempotent(self, database_url, capsys):
        manage.main(["--database-url", database_url, "seed"])
        manage.main(["--database-url", database_url, "seed"])

        assert asyncio.run(_count(database_url)) == 3
        assert "nothing seeded" in capsys.readouterr().out

    def test_backfill_statuses(self, database_url, capsys):
        manage.main(["--database-url", database_url, "seed"])
        manage.main(["--database-url", database_url, "backfill-statuses"])

        assert "Backfilled status on 0 orders." in capsys.readouterr().out

    def test_unknown_command(self, database_url):
        with pytest.raises(SystemExit):
            manage.main(["--database-url", database_url, "migrate"])

    def test_missing_command(self, database_url):
        with pytest.raises(SystemExit) as exc:
            manage.main(["--database-url", database_url])

        assert exc.value.code == 2
