"""Profile ORM — the single persisted profile row.

Invariants:
    - id is an integer primary key; only SINGLE_PROFILE_ID is ever written
    - Every data column is nullable (partial profiles are stored as-is)
    - birthday is stored as an ISO-8601 string (YYYY-MM-DD), parsed by the repository

Design Decisions:
    - String column for birthday: parse failures surface as typed results instead of
      driver-level conversion errors
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from birthday.db.base import Base


class ProfileRow(Base):
    """Baby profile row."""
    __tablename__ = "profile"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    birthday: Mapped[str | None] = mapped_column(String(10), nullable=True)
    picture_uri: Mapped[str | None] = mapped_column(Text, nullable=True)
