"""Status message widget."""

import gi
gi.require_version("Gtk", "4.0")
from gi.repository import Gtk


class StatusLabel(Gtk.Box):
    """
    Status line showing the outcome of the last action.

    Successful actions render in the success style, rejected or failed
    ones in the error style.
    """

    def __init__(self):
        super().__init__(orientation=Gtk.Orientation.HORIZONTAL, spacing=8)

        self._dot = Gtk.Box()
        self._dot.set_size_request(10, 10)
        self._dot.add_css_class("status-indicator")

        self._label = Gtk.Label(label="")
        self._label.add_css_class("status-text")
        self._label.set_halign(Gtk.Align.START)

        self.append(self._dot)
        self.append(self._label)

    def set_status(self, message: str, ok: bool = True) -> None:
        """
        Show a status message.

        Args:
            message: Text to display
            ok: Whether the action succeeded
        """
        for cls in ["success", "error"]:
            self._dot.remove_css_class(cls)
            self._label.remove_css_class(cls)

        state = "success" if ok else "error"
        self._dot.add_css_class(state)
        self._label.add_css_class(state)
        self._label.set_label(message)

