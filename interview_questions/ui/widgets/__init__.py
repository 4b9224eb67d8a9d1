"""Custom widgets for Interview Questions UI."""

from .category_selector import CategorySelector
from .status_label import StatusLabel

__all__ = [
    "CategorySelector",
    "StatusLabel",
]
