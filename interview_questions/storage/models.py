"""Database models for storing practice questions."""

from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import declarative_base

from interview_questions.core.question import Question, QuestionCategory

Base = declarative_base()


class QuestionRow(Base):
    """Question table row."""

    __tablename__ = "questions"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    question_text = Column(Text, unique=True, nullable=False)
    question_type = Column(Text, nullable=False, default=QuestionCategory.GENERAL.value)

    def to_question(self) -> Question:
        """Rebuild the domain question; unknown types read as General."""
        return Question.from_row(self.question_text, self.question_type)
