"""Order Store — async persistence of orders in a single relational table.

All work goes through one shared connection (``StaticPool``) and every call
is serialised by an ``asyncio.Lock``: callers await each storage call before
proceeding, and no two writes to the table run in parallel.
"""

import asyncio
from pathlib import Path

from sqlalchemy import func, or_, select, update
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from storefront.ordering.domain import logger
from storefront.ordering.exceptions import StorageError
from storefront.ordering.order.order import Order
from storefront.ordering.storage.models import Base, OrderRecord


def _ensure_sqlite_directory(database_url: str) -> None:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite" or not url.database or url.database == ":memory:":
        return
    Path(url.database).parent.mkdir(parents=True, exist_ok=True)


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    _ensure_sqlite_directory(database_url)
    connect_args = {}
    if make_url(database_url).get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
    return create_async_engine(
        database_url,
        echo=echo,
        poolclass=StaticPool,
        connect_args=connect_args,
    )


class OrderStore:
    def __init__(self, database_url: str, echo: bool = False):
        self.engine = create_engine(database_url, echo=echo)
        self._sessions = async_sessionmaker(bind=self.engine, expire_on_commit=False)
        self._lock = asyncio.Lock()

    # -------------------------------------------------------------------
    # Schema
    # -------------------------------------------------------------------
    async def create_schema(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_schema(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        await self.engine.dispose()

    # -------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------
    async def insert(self, order: Order) -> Order:
        (stored,) = await self.insert_many([order])
        return stored

    async def insert_many(self, orders: list[Order]) -> list[Order]:
        """Insert every order in one transaction: all are committed, or none are."""
        records = [OrderRecord.from_order(order) for order in orders]
        async with self._lock:
            try:
                async with self._sessions() as session, session.begin():
                    session.add_all(records)
                    await session.flush()
            except SQLAlchemyError as exc:
                logger.error(
                    "order_insert_failed",
                    order_numbers=[order.order_number for order in orders],
                    error=str(exc),
                )
                raise StorageError("Unable to store orders", original_exception=exc) from exc

        for order, record in zip(orders, records, strict=True):
            order.id = record.id
        return orders

    async def update_status(self, order_number: str, status: str) -> bool:
        statement = update(OrderRecord).where(OrderRecord.order_number == order_number).values(status=status)
        return await self._execute_update(statement) > 0

    async def backfill_missing_statuses(self, default: str) -> int:
        """Set ``default`` on rows whose status is null or blank. Explicit statuses are kept."""
        statement = (
            update(OrderRecord)
            .where(or_(OrderRecord.status.is_(None), func.trim(OrderRecord.status) == ""))
            .values(status=default)
        )
        return await self._execute_update(statement)

    async def _execute_update(self, statement) -> int:
        async with self._lock:
            try:
                async with self._sessions() as session, session.begin():
                    result = await session.execute(statement)
                    return result.rowcount
            except SQLAlchemyError as exc:
                raise StorageError("Unable to update orders", original_exception=exc) from exc

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------
    def _newest_first(self, statement):
        return statement.order_by(OrderRecord.created_at.desc(), OrderRecord.id.desc())

    async def _fetch(self, statement) -> list[Order]:
        async with self._lock:
            try:
                async with self._sessions() as session:
                    result = await session.scalars(statement)
                    return [record.to_order() for record in result.all()]
            except SQLAlchemyError as exc:
                raise StorageError("Unable to read orders", original_exception=exc) from exc

    async def list_all(self) -> list[Order]:
        return await self._fetch(self._newest_first(select(OrderRecord)))

    async def find_by_number(self, order_number: str) -> Order | None:
        orders = await self._fetch(select(OrderRecord).where(OrderRecord.order_number == order_number))
        return orders[0] if orders else None

    async def find_by_email(self, email: str) -> list[Order]:
        statement = select(OrderRecord).where(func.lower(OrderRecord.email) == func.lower(email))
        return await self._fetch(self._newest_first(statement))

    async def count(self) -> int:
        async with self._lock:
            try:
                async with self._sessions() as session:
                    return await session.scalar(select(func.count()).select_from(OrderRecord))
            except SQLAlchemyError as exc:
                raise StorageError("Unable to count orders", original_exception=exc) from exc
