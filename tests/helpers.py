"""Test data builders shared across test modules."""
from src.app.core.domain.models import Client


def make_client(client_id: str = "c1", **overrides) -> Client:
    """Build a Client with sensible defaults for tests."""
    fields = {
        "id": client_id,
        "name": "Jo",
        "age": 40,
        "gender": "F",
        "email": "jo@x.com",
        "contact": "+1",
    }
    fields.update(overrides)
    return Client(**fields)
