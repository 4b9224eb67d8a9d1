"""Data storage modules."""

from .database import QuestionStore, StoreResult
from .models import QuestionRow

__all__ = [
    "QuestionStore",
    "StoreResult",
    "QuestionRow",
]
