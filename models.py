from __future__ import annotations
from typing import Optional, List
from datetime import datetime, timezone
from sqlmodel import SQLModel, Field, Column, String, UniqueConstraint
from sqlalchemy import JSON  # JSON nativo de SQLAlchemy (para SQLite lo mapea a TEXT)

# ----------------------------
# Helpers
# ----------------------------
def now_utc() -> datetime:
    return datetime.now(timezone.utc)

# ----------------------------
# Models
# ----------------------------

class User(SQLModel, table=True):
    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("username", name="uq_users_username"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(sa_column=Column(String(120), nullable=False, index=True))
    password_hash: str = Field(sa_column=Column(String(255), nullable=False))
    # Lista de strings legibles; solo se agrega al final (append-only)
    activity_log: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    created_at: datetime = Field(default_factory=now_utc, nullable=False)


class Product(SQLModel, table=True):
    __tablename__ = "products"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(sa_column=Column(String(160), nullable=False))
    price: float
    stock: int = Field(default=0, nullable=False, ge=0)
    created_at: datetime = Field(default_factory=now_utc, nullable=False)
