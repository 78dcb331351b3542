from __future__ import annotations

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class FolderRow(Base):
    __tablename__ = "folders"

    # insertion order is the order pages are served in
    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    folder_id: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    org_id: Mapped[str] = mapped_column(String(64), index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    deleted: Mapped[bool] = mapped_column(Boolean, default=False)
