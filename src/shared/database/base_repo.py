import abc
from typing import Generic, TypeVar, Optional

from sqlalchemy import Executable
from sqlalchemy.exc import SQLAlchemyError

from src.shared.database.base_mapper import BaseEntityMapper
from src.shared.database.database import Database
from src.shared.database.unit_of_work import UnitOfWork
from src.shared.exceptions import StorageError


TEntity = TypeVar("TEntity")
TModel = TypeVar("TModel")

# Driver connection errors (refused, reset, timed out) reach us as OSError, unwrapped by SQLAlchemy
STORAGE_FAILURES = (SQLAlchemyError, OSError)


class BaseRepository(abc.ABC, Generic[TEntity, TModel]):
    def __init__(self, db: Database, mapper: BaseEntityMapper[TModel, TEntity]):
        self.db = db
        self.mapper = mapper

    def unit_of_work(self) -> UnitOfWork[TModel, TEntity]:
        """Create a new unit of work bound to this repository's database and mapper."""
        return UnitOfWork(self.db, self.mapper)

    async def find_one(self, statement: Executable, operation: str = "find_one") -> Optional[TModel]:
        try:
            async with self.db.session_maker() as session:
                result = await session.execute(statement)
                entity = result.scalar_one_or_none()
                if entity is None:
                    return None
                return self.mapper.to_model(entity)
        except STORAGE_FAILURES as e:
            raise StorageError(operation, e) from e

    async def find_all(self, statement: Executable, operation: str = "find_all") -> list[TModel]:
        try:
            async with self.db.session_maker() as session:
                result = await session.execute(statement)
                entities = list(result.scalars().all())
                return [self.mapper.to_model(entity) for entity in entities]
        except STORAGE_FAILURES as e:
            raise StorageError(operation, e) from e
