"""Dependency injection container using dependency-injector library."""
from dependency_injector import containers, providers

from src.app.config import Settings
from src.shared.database.database import Database, DatabaseSettings
from src.shared.mediator.mediator import Mediator

from src.app.core.ports.client_repository import ClientRepositoryPort
from src.app.core.handlers import (
    CreateClientHandler,
    DeleteClientHandler,
    GetAllClientsHandler,
    GetClientByIdHandler,
    UpdateClientHandler,
)
from src.app.infrastructure.mappers.client_mapper import ClientMapper
from src.app.infrastructure.client_repository import ClientRepository


def create_mediator(client_repository: ClientRepositoryPort) -> Mediator:
    """
    Factory function to create the Mediator with one handler per client request.

    Every handler shares the same repository instance.
    """
    return Mediator(
        handlers=[
            GetAllClientsHandler(client_repository),
            GetClientByIdHandler(client_repository),
            CreateClientHandler(client_repository),
            UpdateClientHandler(client_repository),
            DeleteClientHandler(client_repository),
        ]
    )


class Container(containers.DeclarativeContainer):
    """Main application dependency injection container."""

    wiring_config = containers.WiringConfiguration(
        modules=[
            "src.app.api.v1.clients",
        ]
    )

    # =========================================================================
    # CONFIGURATION - Singleton (loaded once, cached)
    # =========================================================================
    config = providers.Singleton(Settings)

    # =========================================================================
    # SINGLETON - Database (shared connection pool)
    # =========================================================================
    database_settings = providers.Singleton(
        DatabaseSettings,
        db_url=config.provided.database_url,
        echo=config.provided.database_echo,
    )

    database = providers.Singleton(
        Database,
        db_settings=database_settings,
    )

    # =========================================================================
    # SINGLETONS - Stateless mapper and repository (shared by all requests)
    # =========================================================================
    client_mapper = providers.Singleton(ClientMapper)

    client_repository = providers.Singleton(
        ClientRepository,
        db=database,
        mapper=client_mapper,
    )

    # =========================================================================
    # SINGLETON - Mediator (handler table built once at startup)
    # =========================================================================
    mediator = providers.Singleton(
        create_mediator,
        client_repository=client_repository,
    )
