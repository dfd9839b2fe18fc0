"""Handlers for read-only client requests."""
from typing import Optional

from src.app.core.domain.models import Client
from src.app.core.ports.client_repository import ClientRepositoryPort
from src.app.core.requests.queries import GetAllClientsQuery, GetClientByIdQuery
from src.shared.mediator.handler import RequestHandler


class GetAllClientsHandler(RequestHandler[GetAllClientsQuery, list[Client]]):
    request_type = GetAllClientsQuery

    def __init__(self, repository: ClientRepositoryPort):
        self.repository = repository

    async def handle(self, request: GetAllClientsQuery) -> list[Client]:
        return await self.repository.get_all_clients()


class GetClientByIdHandler(RequestHandler[GetClientByIdQuery, Optional[Client]]):
    """Look up one client. Absence is a normal result, not an error."""

    request_type = GetClientByIdQuery

    def __init__(self, repository: ClientRepositoryPort):
        self.repository = repository

    async def handle(self, request: GetClientByIdQuery) -> Optional[Client]:
        return await self.repository.get_client_by_id(request.id)
