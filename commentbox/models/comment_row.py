"""Comment ORM model (persisted row layout shared by all SQL stores)."""

from __future__ import annotations

from sqlalchemy import BigInteger, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from commentbox.models.base import Base


class CommentRow(Base):
    __tablename__ = "comment"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    quote: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(Text, nullable=False)
    created: Mapped[int] = mapped_column(BigInteger, nullable=False)  # epoch seconds
    ip: Mapped[str] = mapped_column(Text, nullable=False)
