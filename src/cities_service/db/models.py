from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class City(Base):
    """Row of the pre-provisioned `Cities(Id, Name, Country)` table."""

    __tablename__ = "Cities"

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("Name", String(255), nullable=False)
    country: Mapped[str] = mapped_column("Country", String(255), nullable=False)

    def __repr__(self) -> str:
        return f"City(id={self.id!r}, name={self.name!r}, country={self.country!r})"
