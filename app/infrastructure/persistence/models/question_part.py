"""Question part ORM model. One row per (sub-)question of an exam paper."""

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base


class QuestionPart(Base):
    """Table: question_parts. Text-like fields are free text from uploads."""

    __tablename__ = "question_parts"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    question: Mapped[str | None] = mapped_column(Text)
    course_title: Mapped[str | None] = mapped_column(String)
    course_code: Mapped[str | None] = mapped_column(String)
    semester_term: Mapped[str | None] = mapped_column(String)
    exam_type: Mapped[str | None] = mapped_column(String)
    description_content: Mapped[str | None] = mapped_column(Text)
    short: Mapped[str | None] = mapped_column(String)
    question_number: Mapped[str | None] = mapped_column(String)
    sub_question: Mapped[str | None] = mapped_column(String)
    marks: Mapped[int | None] = mapped_column(Integer)
    has_image: Mapped[bool | None] = mapped_column(Boolean)
    has_description: Mapped[bool | None] = mapped_column(Boolean)
