"""Question category selector widget."""

import gi
gi.require_version("Gtk", "4.0")
from gi.repository import Gtk, GObject

from typing import Optional

from interview_questions.core.question import QuestionCategory, get_all_categories


class CategorySelector(Gtk.Box):
    """
    Question category dropdown.

    Offers General, Technical and Behavioral, optionally preceded by an
    "All" entry when used as a list filter.
    """

    __gsignals__ = {
        'category-changed': (GObject.SignalFlags.RUN_FIRST, None, (str,)),
    }

    ALL_LABEL = "All"

    def __init__(self, label: str = "Category:", include_all: bool = False,
                 default: QuestionCategory = QuestionCategory.GENERAL):
        super().__init__(orientation=Gtk.Orientation.HORIZONTAL, spacing=8)

        self._include_all = include_all

        caption = Gtk.Label(label=label)
        caption.add_css_class("text-muted")
        self.append(caption)

        self._dropdown = Gtk.DropDown()
        self._model = Gtk.StringList()
        self._categories = []

        if include_all:
            self._model.append(self.ALL_LABEL)
            self._categories.append(None)

        for category, display_name in get_all_categories():
            self._model.append(display_name)
            self._categories.append(category)

        self._dropdown.set_model(self._model)
        self._current = None if include_all else default
        self.set_category(self._current)
        self._dropdown.connect("notify::selected", self._on_selection_changed)

        self.append(self._dropdown)

    def _on_selection_changed(self, dropdown, _) -> None:
        """Handle dropdown selection change."""
        index = dropdown.get_selected()
        if 0 <= index < len(self._categories):
            self._current = self._categories[index]
            label = self._current.value if self._current else self.ALL_LABEL
            self.emit('category-changed', label)

    def get_category(self) -> Optional[QuestionCategory]:
        """Get the selected category, None for "All"."""
        return self._current

    def set_category(self, category: Optional[QuestionCategory]) -> None:
        """Select a category."""
        try:
            index = self._categories.index(category)
        except ValueError:
            return
        self._dropdown.set_selected(index)
        self._current = category
