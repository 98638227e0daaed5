"""Course ORM model."""

from sqlalchemy import Float, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base


class Course(Base):
    """Table: courses."""

    __tablename__ = "courses"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    code: Mapped[str | None] = mapped_column(String)
    title: Mapped[str | None] = mapped_column(String)
    department: Mapped[str | None] = mapped_column(String)
    credit: Mapped[float | None] = mapped_column(Float)
