"""Main GTK4 Application for Interview Questions."""

import sys
import logging
import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")

from gi.repository import Gtk, Adw, Gio

from interview_questions import __app_id__, __app_name__, __version__
from interview_questions.core.config import get_config
from interview_questions.core.log import setup_logging
from interview_questions.storage.database import QuestionStore

logger = logging.getLogger(__name__)


class InterviewQuestionsApp(Adw.Application):
    """
    Interview Questions application.

    Owns the question store and the main window.
    """

    def __init__(self, on_home=None):
        super().__init__(
            application_id=__app_id__,
            flags=Gio.ApplicationFlags.DEFAULT_FLAGS,
        )

        self.main_window = None
        self._config = get_config()
        self._on_home = on_home
        self._store = QuestionStore(self._config.database.path)

        self.connect("activate", self.on_activate)
        self.connect("shutdown", self.on_shutdown)

        self._setup_actions()

    def _setup_actions(self) -> None:
        """Set up application actions."""
        quit_action = Gio.SimpleAction.new("quit", None)
        quit_action.connect("activate", self._on_quit)
        self.add_action(quit_action)

        about_action = Gio.SimpleAction.new("about", None)
        about_action.connect("activate", self._on_about)
        self.add_action(about_action)

        self.set_accels_for_action("app.quit", ["<Control>q"])

    def on_activate(self, app) -> None:
        """Handle application activation."""
        if not self.main_window:
            if not self._store.initialize():
                logger.error(f"Question database unavailable: {self._store.db_path}")

            from interview_questions.ui.main_window import MainWindow
            self.main_window = MainWindow(
                self,
                store=self._store,
                config=self._config,
                on_home=self._on_home,
            )

        self.main_window.present()

    def on_shutdown(self, app) -> None:
        """Handle application shutdown."""
        self._store.close()

        # Remember the last category used for new questions
        if self.main_window:
            self._config.ui.default_category = self.main_window.current_category()

        try:
            self._config.save()
        except Exception as e:
            logger.error(f"Error saving config: {e}")

    def _on_quit(self, action, param) -> None:
        """Handle quit action."""
        self.quit()

    def _on_about(self, action, param) -> None:
        """Handle about action."""
        about = Adw.AboutWindow(
            transient_for=self.main_window,
            application_name=__app_name__,
            application_icon=__app_id__,
            version=__version__,
            developer_name="NUMockMate",
            license_type=Gtk.License.MIT_X11,
            comments="Keep a personal list of interview-practice questions",
        )
        about.present()


def main():
    """Main entry point."""
    setup_logging(get_config().log_level)
    logger.info(f"{__app_name__} {__version__} starting")
    app = InterviewQuestionsApp()
    return app.run(sys.argv)


if __name__ == "__main__":
    sys.exit(main())
