"""Main application window."""

import gi
gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Gtk, Adw, Gdk

import logging
from pathlib import Path
from typing import Callable, List, Optional

from interview_questions.core.config import AppConfig, CONFIG_DIR
from interview_questions.core.question import Question, QuestionCategory
from interview_questions.storage.database import QuestionStore, StoreResult, STATUS_EMPTY

from .widgets.category_selector import CategorySelector
from .widgets.status_label import StatusLabel

logger = logging.getLogger(__name__)

STATUS_NO_SELECTION = "Please select a question to delete."


class MainWindow(Adw.ApplicationWindow):
    """
    Question manager window.

    Lists stored questions and lets the user add or delete them.
    """

    def __init__(self, app, store: QuestionStore, config: AppConfig,
                 on_home: Optional[Callable[[], None]] = None):
        super().__init__(application=app)

        self._store = store
        self._config = config
        self._on_home = on_home

        self._setup_window()
        self._load_styles()
        self._build_ui()

        self._render(self._store.list_all())

    def _setup_window(self) -> None:
        """Configure window properties."""
        self.set_title(self._config.ui.title)
        self.set_default_size(
            self._config.ui.window_width,
            self._config.ui.window_height
        )
        self.set_size_request(600, 400)

        if self._config.ui.fullscreen:
            self.fullscreen()

    def _load_styles(self) -> None:
        """Load CSS styles."""
        css_paths = [
            Path(__file__).parent.parent / "resources" / "styles" / "questions.css",
            CONFIG_DIR / "styles" / "custom.css",
        ]

        for css_path in css_paths:
            if css_path.exists():
                css_provider = Gtk.CssProvider()
                try:
                    css_provider.load_from_path(str(css_path))
                    Gtk.StyleContext.add_provider_for_display(
                        Gdk.Display.get_default(),
                        css_provider,
                        Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION
                    )
                except Exception as e:
                    logger.warning(f"Error loading CSS from {css_path}: {e}")

    def _build_ui(self) -> None:
        """Build the main UI layout."""
        main_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=0)

        main_box.append(self._build_header())
        main_box.append(self._build_content())

        self.set_content(main_box)

    def _build_header(self) -> Adw.HeaderBar:
        """Build the header bar."""
        header = Adw.HeaderBar()

        home_btn = Gtk.Button(label="Back to Home")
        home_btn.connect("clicked", self._on_home_clicked)
        header.pack_start(home_btn)

        title = Gtk.Label(label="Interview Questions")
        title.add_css_class("heading")
        header.set_title_widget(title)

        self._filter = CategorySelector(label="Show:", include_all=True)
        self._filter.connect("category-changed", self._on_filter_changed)
        header.pack_end(self._filter)

        return header

    def _build_content(self) -> Gtk.Widget:
        """Build list, input row and status line."""
        content = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=16)
        content.set_margin_top(20)
        content.set_margin_bottom(20)
        content.set_margin_start(20)
        content.set_margin_end(20)

        # Question list
        self._list_box = Gtk.ListBox()
        self._list_box.set_selection_mode(Gtk.SelectionMode.SINGLE)
        self._list_box.add_css_class("question-list")

        list_scroll = Gtk.ScrolledWindow()
        list_scroll.set_child(self._list_box)
        list_scroll.set_vexpand(True)
        content.append(list_scroll)

        self._stats_label = Gtk.Label(label="")
        self._stats_label.add_css_class("text-muted")
        self._stats_label.set_halign(Gtk.Align.START)
        content.append(self._stats_label)

        # Input row
        input_box = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=10)
        input_box.set_halign(Gtk.Align.CENTER)

        self._entry = Gtk.Entry()
        self._entry.set_placeholder_text("Enter a new question...")
        self._entry.set_hexpand(True)
        self._entry.set_size_request(400, -1)
        self._entry.connect("activate", self._on_add_clicked)
        input_box.append(self._entry)

        self._category_selector = CategorySelector(
            label="Type:",
            default=self._config.ui.default_category,
        )
        input_box.append(self._category_selector)

        add_btn = Gtk.Button(label="Add Question")
        add_btn.add_css_class("suggested-action")
        add_btn.connect("clicked", self._on_add_clicked)
        input_box.append(add_btn)

        delete_btn = Gtk.Button(label="Delete Selected")
        delete_btn.add_css_class("destructive-action")
        delete_btn.connect("clicked", self._on_delete_clicked)
        input_box.append(delete_btn)

        content.append(input_box)

        self._status = StatusLabel()
        content.append(self._status)

        return content

    def _render(self, questions: List[Question]) -> None:
        """Show questions matching the current filter."""
        while True:
            row = self._list_box.get_row_at_index(0)
            if row:
                self._list_box.remove(row)
            else:
                break

        selected = self._filter.get_category()
        for question in questions:
            if selected is None or question.category is selected:
                self._list_box.append(self._create_list_row(question))

        self._update_stats()

    def _create_list_row(self, question: Question) -> Gtk.ListBoxRow:
        """Create a list row for a question."""
        row = Gtk.ListBoxRow()

        label = Gtk.Label(label=question.display())
        label.set_halign(Gtk.Align.START)
        label.set_wrap(True)
        label.set_margin_top(6)
        label.set_margin_bottom(6)
        label.set_margin_start(8)
        label.set_margin_end(8)
        label.add_css_class(question.category.value.lower())

        row.set_child(label)
        row._question = question

        return row

    def _update_stats(self) -> None:
        """Show per-category counts."""
        stats = self._store.get_stats()
        if not stats:
            self._stats_label.set_label("")
            return

        counts = ", ".join(f"{name}: {n}" for name, n in stats["by_category"].items())
        self._stats_label.set_label(f"{stats['total_questions']} questions ({counts})")

    def _apply_result(self, result: StoreResult) -> None:
        self._render(result.questions)
        self._status.set_status(result.status, ok=result.ok)

    def _on_add_clicked(self, widget) -> None:
        """Handle add button click or Enter in the entry."""
        text = self._entry.get_text().strip()
        if not text:
            self._status.set_status(STATUS_EMPTY, ok=False)
            return

        self._apply_result(self._store.add(text, self.current_category()))
        self._entry.set_text("")

    def _on_delete_clicked(self, button) -> None:
        """Handle delete button click."""
        row = self._list_box.get_selected_row()
        if row is None or not hasattr(row, "_question"):
            self._status.set_status(STATUS_NO_SELECTION, ok=False)
            return

        question = row._question
        self._apply_result(self._store.remove(question.text, question.category))

    def current_category(self) -> QuestionCategory:
        """Category selected for new questions."""
        return self._category_selector.get_category() or QuestionCategory.GENERAL

    def _on_filter_changed(self, selector, label) -> None:
        """Handle list filter change."""
        selected = selector.get_category()
        if selected is None:
            self._render(self._store.list_all())
        else:
            self._render(self._store.list_by_category(selected))

    def _on_home_clicked(self, button) -> None:
        """Handle back-to-home click."""
        if self._on_home is not None:
            self._on_home()
        else:
            self.close()
