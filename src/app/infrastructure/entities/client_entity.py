from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.shared.database.database import Base


class ClientEntity(Base):
    """SQLAlchemy model for Client table. The ID is both primary key and shard key."""
    __tablename__ = "clients"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    age: Mapped[int] = mapped_column(Integer)
    gender: Mapped[str] = mapped_column(String(50))
    email: Mapped[str] = mapped_column(String(255))
    contact: Mapped[str] = mapped_column(String(255))
