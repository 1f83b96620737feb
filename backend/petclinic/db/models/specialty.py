"""Module: specialty."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from petclinic.db.base import Base


class Specialty(Base):
    __tablename__ = "specialties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(80), nullable=False, unique=True)
