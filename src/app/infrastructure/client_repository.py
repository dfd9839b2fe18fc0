import logging
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from src.app.core.domain.models import Client
from src.app.core.ports.client_repository import ClientRepositoryPort
from src.shared.database.base_repo import BaseRepository, STORAGE_FAILURES
from src.shared.database.database import Database
from src.shared.exceptions import ConflictingEntityFound, StorageError

from src.app.infrastructure.entities.client_entity import ClientEntity
from src.app.infrastructure.mappers.client_mapper import ClientMapper

logger = logging.getLogger(__name__)


class ClientRepository(BaseRepository[ClientEntity, Client], ClientRepositoryPort):
    """
    SQL-backed client storage.

    Holds no per-request state: every call opens its own session from the
    shared database, so one instance serves all concurrent requests.
    """

    def __init__(self, db: Database, mapper: ClientMapper):
        super().__init__(db, mapper)

    async def get_all_clients(self) -> list[Client]:
        return await self.find_all(
            select(ClientEntity).order_by(ClientEntity.id),
            operation="get_all_clients",
        )

    async def get_client_by_id(self, client_id: str) -> Optional[Client]:
        return await self.find_one(
            select(ClientEntity).where(ClientEntity.id == client_id),
            operation="get_client_by_id",
        )

    async def add_client(self, client: Client) -> None:
        """Insert a client; the primary key rejects duplicate IDs."""
        try:
            async with self.unit_of_work() as uow:
                uow.add(client)
        except IntegrityError as e:
            logger.warning("Rejected duplicate client ID %s", client.id)
            raise ConflictingEntityFound("Client", "id", client.id) from e
        except STORAGE_FAILURES as e:
            logger.error("Failed to add client %s: %s", client.id, e)
            raise StorageError("add_client", e) from e

    async def update_client(self, client: Client) -> None:
        """Upsert a client by ID."""
        try:
            async with self.unit_of_work() as uow:
                await uow.merge(client)
        except STORAGE_FAILURES as e:
            logger.error("Failed to update client %s: %s", client.id, e)
            raise StorageError("update_client", e) from e

    async def delete_client(self, client_id: str) -> None:
        try:
            async with self.unit_of_work() as uow:
                await uow.execute(delete(ClientEntity).where(ClientEntity.id == client_id))
        except STORAGE_FAILURES as e:
            logger.error("Failed to delete client %s: %s", client_id, e)
            raise StorageError("delete_client", e) from e
