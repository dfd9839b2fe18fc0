from typing import Any, Generic, TypeVar

from sqlalchemy import Executable
from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.database.base_mapper import BaseEntityMapper
from src.shared.database.database import Database


TModel = TypeVar("TModel")
TEntity = TypeVar("TEntity")


class UnitOfWork(Generic[TModel, TEntity]):
    """
    One session and one transaction around a group of writes.

    A fresh session is opened on every ``async with``, so an instance must not be
    entered concurrently. Repositories create one per write operation.
    """

    def __init__(
        self,
        db: Database,
        mapper: BaseEntityMapper[TModel, TEntity],
    ) -> None:
        self.db = db
        self.session: AsyncSession
        self.mapper = mapper

    async def __aenter__(self):
        self.session = self.db.session_maker()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                await self.commit()
            else:
                await self.rollback()
        finally:
            await self.session.close()

    def add(self, model_instance: TModel) -> None:
        self.session.add(self.mapper.to_entity(model_instance))

    async def merge(self, model_instance: TModel) -> None:
        await self.session.merge(self.mapper.to_entity(model_instance))

    async def execute(self, statement: Executable) -> Any:
        return await self.session.execute(statement)

    async def commit(self):
        try:
            await self.session.commit()
        except Exception:
            await self.rollback()
            raise

    async def rollback(self):
        await self.session.rollback()
