"""API schemas for client requests and responses."""
from pydantic import BaseModel, Field


class CreateClientRequest(BaseModel):
    """Request schema for creating a new client. The caller chooses the ID."""
    id: str = Field(..., min_length=1, description="Unique client ID")
    name: str
    age: int
    gender: str
    email: str
    contact: str


class UpdateClientRequest(BaseModel):
    """Request schema for replacing a client's fields. The ID comes from the URL."""
    name: str
    age: int
    gender: str
    email: str
    contact: str


class ClientResponse(BaseModel):
    """Response schema for client data returned by the API."""
    id: str
    name: str
    age: int
    gender: str
    email: str
    contact: str

    model_config = {"from_attributes": True}
