"""Account and profile ORM models (read-only; owned by the admin console)."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base


class Account(Base):
    """Login account. Table: accounts."""

    __tablename__ = "accounts"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    email: Mapped[str | None] = mapped_column(String)
    role: Mapped[str | None] = mapped_column(String)


class Profile(Base):
    """Profile sub-resource of an account (same id). Table: profile."""

    __tablename__ = "profile"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    email: Mapped[str | None] = mapped_column(String)
    full_name: Mapped[str | None] = mapped_column(String)
    student_id: Mapped[str | None] = mapped_column(String)
    department: Mapped[str | None] = mapped_column(String)
    batch: Mapped[str | None] = mapped_column(String)
    program: Mapped[str | None] = mapped_column(String)
    phone: Mapped[str | None] = mapped_column(String)
