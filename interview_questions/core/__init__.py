"""Core modules for Interview Questions."""

from .config import AppConfig, get_config
from .exceptions import (
    QuestionStoreError,
    StorageUnavailableError,
    EmptyQuestionError,
    DuplicateQuestionError,
    QuestionNotFoundError,
)
from .question import Question, QuestionCategory

__all__ = [
    "AppConfig",
    "get_config",
    "Question",
    "QuestionCategory",
    "QuestionStoreError",
    "StorageUnavailableError",
    "EmptyQuestionError",
    "DuplicateQuestionError",
    "QuestionNotFoundError",
]
