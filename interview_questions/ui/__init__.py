"""UI components for Interview Questions."""

from .main_window import MainWindow

__all__ = [
    "MainWindow",
]
