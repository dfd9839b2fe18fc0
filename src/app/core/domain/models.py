"""Domain models used in business logic."""
from pydantic import BaseModel, Field


class Client(BaseModel):
    """Domain model for Client used in business logic."""
    id: str = Field(..., description="Caller-assigned unique client ID, also the storage key")
    name: str
    age: int
    gender: str
    email: str
    contact: str

    model_config = {"from_attributes": True}
