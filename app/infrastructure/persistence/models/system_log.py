"""Admin audit log ORM model (system_logs, append-only)."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base


class SystemLog(Base):
    """Table: system_logs. One row per admin action."""

    __tablename__ = "system_logs"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    admin_name: Mapped[str | None] = mapped_column(String)
    admin_email: Mapped[str | None] = mapped_column(String)
    description: Mapped[str | None] = mapped_column(Text)
    resource_type: Mapped[str | None] = mapped_column(String)
    action: Mapped[str | None] = mapped_column(String)
    method: Mapped[str | None] = mapped_column(String)
    endpoint: Mapped[str | None] = mapped_column(String)
    success: Mapped[bool | None] = mapped_column(Boolean)
    timestamp: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
