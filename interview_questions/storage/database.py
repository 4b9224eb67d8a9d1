"""SQLite store for interview-practice questions."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Set, Union

from sqlalchemy import create_engine, select, delete, or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session as DBSession

from interview_questions.core.exceptions import (
    QuestionStoreError,
    StorageUnavailableError,
    EmptyQuestionError,
    DuplicateQuestionError,
    QuestionNotFoundError,
)
from interview_questions.core.question import Question, QuestionCategory
from .models import Base, QuestionRow

logger = logging.getLogger(__name__)

STATUS_ADDED = "Question added successfully!"
STATUS_REMOVED = "Question removed successfully!"
STATUS_EMPTY = "Please enter a question."
STATUS_DUPLICATE = "Question already exists."
STATUS_NOT_FOUND = "Question not found."
STATUS_ADD_ERROR = "Error adding question."
STATUS_REMOVE_ERROR = "Error removing question."

CategoryLike = Union[QuestionCategory, str, None]


@dataclass
class StoreResult:
    """Outcome of a store mutation, ready for display."""
    ok: bool
    status: str
    questions: List[Question] = field(default_factory=list)
    error: Optional[QuestionStoreError] = None

    @property
    def display_items(self) -> List[str]:
        """Display strings for the refreshed question list."""
        return [q.display() for q in self.questions]


class QuestionStore:
    """
    SQLite-backed store for practice questions.

    Owns the single ``questions`` table. Public methods never raise:
    failures are logged and reported through StoreResult status messages.
    """

    def __init__(self, db_path: Union[Path, str]):
        """
        Initialize the store.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = Path(db_path)

        self.engine = create_engine(
            f"sqlite:///{self.db_path}",
            echo=False,
        )

        # Session factory
        self.SessionLocal = sessionmaker(bind=self.engine)

    def _get_session(self) -> DBSession:
        """Get a database session."""
        return self.SessionLocal()

    def initialize(self) -> bool:
        """
        Create the database directory and questions table if missing.

        Returns:
            True if the table is ready
        """
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            Base.metadata.create_all(self.engine)
            return True
        except (OSError, SQLAlchemyError):
            logger.exception(f"Could not initialize question table in {self.db_path}")
            return False

    def close(self) -> None:
        """Release pooled connections."""
        self.engine.dispose()

    # Reads

    def _fetch_all(self) -> List[Question]:
        try:
            with self._get_session() as session:
                stmt = select(QuestionRow).order_by(QuestionRow.id)
                rows = session.execute(stmt).scalars().all()
                return [row.to_question() for row in rows]
        except SQLAlchemyError as e:
            raise StorageUnavailableError(f"Could not read questions: {e}") from e

    def list_all(self) -> List[Question]:
        """
        Get every stored question in insertion order.

        Returns:
            List of Question objects, empty on storage error
        """
        try:
            return self._fetch_all()
        except StorageUnavailableError:
            logger.exception("Error listing questions")
            return []

    def _fetch_known_texts(self) -> Set[str]:
        return {q.text for q in self._fetch_all()}

    def known_texts(self) -> Set[str]:
        """Texts currently stored, recomputed from the table on each call."""
        try:
            return self._fetch_known_texts()
        except StorageUnavailableError:
            logger.exception("Error reading stored question texts")
            return set()

    def list_by_category(self, category: CategoryLike) -> List[Question]:
        """
        Get questions of a single category.

        Args:
            category: Category or its label

        Returns:
            Matching questions in insertion order
        """
        category = QuestionCategory.from_label(category)
        return [q for q in self.list_all() if q.category is category]

    def get_stats(self) -> dict:
        """
        Get statistics about stored questions.

        Returns:
            Dictionary with stats, empty on storage error
        """
        try:
            questions = self._fetch_all()
        except StorageUnavailableError:
            logger.exception("Error getting question stats")
            return {}

        by_category: Dict[str, int] = {c.value: 0 for c in QuestionCategory}
        for q in questions:
            by_category[q.category.value] += 1

        return {
            "total_questions": len(questions),
            "by_category": by_category,
        }

    # Mutations

    def _insert(self, text: Optional[str], category: QuestionCategory) -> Question:
        text = (text or "").strip()
        if not text:
            raise EmptyQuestionError("Question text is empty")

        if text in self._fetch_known_texts():
            raise DuplicateQuestionError(f"Question already stored: {text!r}")

        try:
            with self._get_session() as session:
                session.add(QuestionRow(question_text=text, question_type=category.value))
                session.commit()
        except IntegrityError as e:
            raise DuplicateQuestionError(f"Question already stored: {text!r}") from e
        except SQLAlchemyError as e:
            raise StorageUnavailableError(f"Could not insert question: {e}") from e

        return Question(text=text, category=category)

    def _delete(self, text: Optional[str], category: QuestionCategory) -> None:
        # Unrecognized stored types read back as General, so they delete as General too
        type_match = QuestionRow.question_type == category.value
        if category is QuestionCategory.GENERAL:
            type_match = or_(
                type_match,
                QuestionRow.question_type.notin_([c.value for c in QuestionCategory]),
            )

        try:
            with self._get_session() as session:
                stmt = delete(QuestionRow).where(
                    QuestionRow.question_text == text,
                    type_match,
                )
                result = session.execute(stmt)
                session.commit()
                deleted = result.rowcount
        except SQLAlchemyError as e:
            raise StorageUnavailableError(f"Could not delete question: {e}") from e

        if not deleted:
            raise QuestionNotFoundError(f"No {category.value} question {text!r}")

    def add(self, text: Optional[str], category: CategoryLike = QuestionCategory.GENERAL) -> StoreResult:
        """
        Add a question.

        Args:
            text: Question text, surrounding whitespace is stripped
            category: Category or its label, unknown labels mean General

        Returns:
            StoreResult with status message and refreshed question list
        """
        category = QuestionCategory.from_label(category)
        try:
            question = self._insert(text, category)
        except EmptyQuestionError as e:
            logger.debug(f"Rejected empty question: {e}")
            return self._result(False, STATUS_EMPTY, e)
        except DuplicateQuestionError as e:
            logger.info(f"Rejected duplicate question: {e}")
            return self._result(False, STATUS_DUPLICATE, e)
        except StorageUnavailableError as e:
            logger.exception("Error adding question")
            return self._result(False, STATUS_ADD_ERROR, e)

        logger.info(f"Added question: {question.display()}")
        return self._result(True, STATUS_ADDED)

    def remove(self, text: Optional[str], category: CategoryLike) -> StoreResult:
        """
        Remove the question matching both text and category.

        Args:
            text: Exact question text
            category: Category or its label

        Returns:
            StoreResult with status message and refreshed question list
        """
        category = QuestionCategory.from_label(category)
        try:
            self._delete(text, category)
        except QuestionNotFoundError as e:
            logger.warning(f"Nothing to remove: {e}")
            return self._result(False, STATUS_NOT_FOUND, e)
        except StorageUnavailableError as e:
            logger.exception("Error removing question")
            return self._result(False, STATUS_REMOVE_ERROR, e)

        logger.info(f"Removed question: {category.value}: {text}")
        return self._result(True, STATUS_REMOVED)

    def _result(self, ok: bool, status: str, error: Optional[QuestionStoreError] = None) -> StoreResult:
        """Build a result carrying a fresh read of the table."""
        return StoreResult(ok=ok, status=status, questions=self.list_all(), error=error)
