import uuid
from typing import Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _uuid() -> str:
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"
    id: Mapped[str] = mapped_column(String, primary_key=True, default=_uuid)
    full_name: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String, nullable=True)


class Position(Base):
    __tablename__ = "positions"
    id: Mapped[str] = mapped_column(String, primary_key=True, default=_uuid)
    title: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    occupied_by: Mapped[Optional[str]] = mapped_column(String, ForeignKey("users.id"), nullable=True, index=True)


class Application(Base):
    __tablename__ = "applications"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[Optional[str]] = mapped_column(String, ForeignKey("users.id"), nullable=True, index=True)
    position_id: Mapped[str] = mapped_column(String, ForeignKey("positions.id"), index=True)
    priority: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)


class AppAdmin(Base):
    __tablename__ = "app_admins"
    user_id: Mapped[str] = mapped_column(String, ForeignKey("users.id"), primary_key=True)
