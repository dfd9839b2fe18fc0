"""Request handlers, one per client query or command."""
from src.app.core.handlers.command_handlers import CreateClientHandler, DeleteClientHandler, UpdateClientHandler
from src.app.core.handlers.query_handlers import GetAllClientsHandler, GetClientByIdHandler

__all__ = [
    "GetAllClientsHandler",
    "GetClientByIdHandler",
    "CreateClientHandler",
    "UpdateClientHandler",
    "DeleteClientHandler",
]
