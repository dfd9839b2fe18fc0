"""Read-only requests for clients."""
from typing import Optional

from src.app.core.domain.models import Client
from src.shared.mediator.requests import Query


class GetAllClientsQuery(Query[list[Client]]):
    """Fetch every stored client."""


class GetClientByIdQuery(Query[Optional[Client]]):
    """Fetch one client; the result is None when no client has this ID."""
    id: str
