"""Question model and categories."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


class QuestionCategory(str, Enum):
    """Categories a practice question can be filed under."""
    GENERAL = "General"
    TECHNICAL = "Technical"
    BEHAVIORAL = "Behavioral"

    @property
    def label(self) -> str:
        """Display label, also the value stored in the database."""
        return self.value

    @classmethod
    def from_label(cls, label: Optional[str]) -> "QuestionCategory":
        """
        Look up a category by its label.

        Unknown or missing labels fall back to GENERAL.

        Args:
            label: Stored or user-selected label

        Returns:
            Matching QuestionCategory
        """
        for category in cls:
            if category.value == label:
                return category
        return cls.GENERAL


def get_all_categories() -> List[Tuple["QuestionCategory", str]]:
    """Get all categories with their display labels."""
    return [(category, category.label) for category in QuestionCategory]


@dataclass(frozen=True)
class Question:
    """An interview-practice question."""
    text: str
    category: QuestionCategory = QuestionCategory.GENERAL

    @classmethod
    def from_row(cls, text: str, label: Optional[str]) -> "Question":
        """Build a question from stored column values."""
        return cls(text=text, category=QuestionCategory.from_label(label))

    def display(self) -> str:
        """Render as '<Category>: <text>'."""
        return f"{self.category.label}: {self.text}"

    def __str__(self) -> str:
        return self.display()
