from typing import cast

import pytest
from httpx import HTTPStatusError

from src.app.core.requests import GetAllClientsQuery
from src.sdk import CreateClientRequest, UpdateClientRequest
from src.shared.exceptions import StorageError


def create_request(client_id: str = "c1", **overrides) -> CreateClientRequest:
    fields = {
        "id": client_id,
        "name": "Jo",
        "age": 40,
        "gender": "F",
        "email": "jo@x.com",
        "contact": "+1",
    }
    fields.update(overrides)
    return CreateClientRequest(**fields)


@pytest.mark.asyncio
async def test_create_client(registry_client):
    """Test creating a client via API."""
    response = await registry_client.create_client(create_request())

    assert response.id == "c1"
    assert response.name == "Jo"
    assert response.age == 40
    assert response.gender == "F"
    assert response.email == "jo@x.com"
    assert response.contact == "+1"


@pytest.mark.asyncio
async def test_create_client_returns_201_with_location(registry_client):
    http_response = await registry_client.client.post(
        "/api/v1/clients", json=create_request("c5").model_dump()
    )

    assert http_response.status_code == 201
    assert http_response.headers["location"].endswith("/api/v1/clients/c5")


@pytest.mark.asyncio
async def test_create_duplicate_id(registry_client):
    """Test creating a client with an existing ID fails with 409."""
    await registry_client.create_client(create_request("c1"))

    with pytest.raises(HTTPStatusError) as exc_info:
        await registry_client.create_client(create_request("c1", name="Other"))

    error = cast(HTTPStatusError, exc_info.value)
    assert error.response.status_code == 409
    assert "already exists" in error.response.json()["detail"]


@pytest.mark.asyncio
async def test_create_without_body_is_bad_request(registry_client):
    http_response = await registry_client.client.post("/api/v1/clients")

    assert http_response.status_code == 400


@pytest.mark.asyncio
async def test_create_with_missing_fields_is_bad_request(registry_client):
    http_response = await registry_client.client.post(
        "/api/v1/clients", json={"id": "c1", "name": "Jo"}
    )

    assert http_response.status_code == 400


@pytest.mark.asyncio
async def test_list_clients(registry_client):
    assert await registry_client.list_clients() == []

    await registry_client.create_client(create_request("c1"))
    await registry_client.create_client(create_request("c2", name="Sam"))

    clients = await registry_client.list_clients()
    assert {c.id for c in clients} == {"c1", "c2"}


@pytest.mark.asyncio
async def test_get_client(registry_client):
    """Test getting a client by ID."""
    created = await registry_client.create_client(create_request("c1"))

    retrieved = await registry_client.get_client("c1")

    assert retrieved == created


@pytest.mark.asyncio
async def test_get_missing_client_is_404(registry_client):
    with pytest.raises(HTTPStatusError) as exc_info:
        await registry_client.get_client("ghost")

    error = cast(HTTPStatusError, exc_info.value)
    assert error.response.status_code == 404


@pytest.mark.asyncio
async def test_update_client(registry_client):
    await registry_client.create_client(create_request("c1"))

    updated = await registry_client.update_client(
        "c1",
        UpdateClientRequest(name="Jo2", age=41, gender="F", email="jo@x.com", contact="+1"),
    )

    assert updated.id == "c1"
    assert updated.name == "Jo2"
    assert updated.age == 41
    assert (await registry_client.get_client("c1")).name == "Jo2"


@pytest.mark.asyncio
async def test_update_missing_client_is_404(registry_client):
    with pytest.raises(HTTPStatusError) as exc_info:
        await registry_client.update_client(
            "ghost",
            UpdateClientRequest(name="X", age=1, gender="M", email="x@x.com", contact="0"),
        )

    error = cast(HTTPStatusError, exc_info.value)
    assert error.response.status_code == 404
    assert await registry_client.list_clients() == []


@pytest.mark.asyncio
async def test_update_without_body_is_bad_request(registry_client):
    await registry_client.create_client(create_request("c1"))

    http_response = await registry_client.client.put("/api/v1/clients/c1")

    assert http_response.status_code == 400


@pytest.mark.asyncio
async def test_update_with_missing_fields_is_bad_request(registry_client):
    await registry_client.create_client(create_request("c1"))

    http_response = await registry_client.client.put(
        "/api/v1/clients/c1", json={"name": "Jo2"}
    )

    assert http_response.status_code == 400
    assert (await registry_client.get_client("c1")).name == "Jo"


@pytest.mark.asyncio
async def test_delete_client(registry_client):
    await registry_client.create_client(create_request("c1"))

    http_response = await registry_client.client.delete("/api/v1/clients/c1")

    assert http_response.status_code == 204
    with pytest.raises(HTTPStatusError):
        await registry_client.get_client("c1")


@pytest.mark.asyncio
async def test_delete_missing_client_is_404(registry_client):
    with pytest.raises(HTTPStatusError) as exc_info:
        await registry_client.delete_client("ghost")

    error = cast(HTTPStatusError, exc_info.value)
    assert error.response.status_code == 404


@pytest.mark.asyncio
async def test_storage_failure_is_503(registry_client, mediator, monkeypatch):
    async def failing_handle(request: GetAllClientsQuery):
        raise StorageError("get_all_clients")

    monkeypatch.setattr(mediator.handler_for(GetAllClientsQuery), "handle", failing_handle)

    http_response = await registry_client.client.get("/api/v1/clients")

    assert http_response.status_code == 503


@pytest.mark.asyncio
async def test_health(registry_client):
    http_response = await registry_client.client.get("/health")

    assert http_response.status_code == 200
    assert http_response.json() == {"status": "healthy"}
