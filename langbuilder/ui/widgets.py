"""Custom urwid widgets for the vocabulary builder."""

from typing import Callable, Optional

import urwid

from langbuilder.core.models import Sentence, Word
from langbuilder.ui.theme import button_attrs, edit_attrs


class ActionButton(urwid.WidgetWrap):
    """A button that can be disabled; clicks are ignored while disabled."""

    def __init__(self, label: str, on_press: Callable[[], None], danger: bool = False):
        self.label = label
        self.enabled = True
        self._on_press = on_press
        self._danger = danger

        self.button = urwid.Button(label)
        urwid.connect_signal(self.button, "click", self._clicked)
        normal, focus = button_attrs(True, danger)
        self.attr_map = urwid.AttrMap(self.button, normal, focus_map=focus)
        super().__init__(self.attr_map)

    @property
    def width(self) -> int:
        """Columns needed to render the label with its brackets."""
        return len(self.label) + 4

    def set_enabled(self, enabled: bool):
        """Enable or disable the button."""
        self.enabled = enabled
        normal, focus = button_attrs(enabled, self._danger)
        self.attr_map.set_attr_map({None: normal})
        self.attr_map.set_focus_map({None: focus})

    def _clicked(self, button):
        if self.enabled:
            self._on_press()


class GuardedEdit(urwid.Edit):
    """An edit field that ignores typing while disabled."""

    def __init__(self, *args, on_enter: Optional[Callable[[], None]] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.enabled = True
        self.on_enter = on_enter

    def keypress(self, size, key):
        if key == "enter" and self.on_enter:
            if self.enabled:
                self.on_enter()
            return None
        if not self.enabled and (key in ("backspace", "delete") or self.valid_char(key)):
            return None
        return super().keypress(size, key)


def styled_edit(edit: GuardedEdit) -> urwid.AttrMap:
    """Wrap an edit field with the edit palette."""
    normal, focus = edit_attrs(True)
    return urwid.AttrMap(edit, normal, focus_map=focus)


def set_edit_enabled(wrapped: urwid.AttrMap, enabled: bool):
    """Toggle a wrapped GuardedEdit and its colors."""
    wrapped.original_widget.enabled = enabled
    normal, focus = edit_attrs(enabled)
    wrapped.set_attr_map({None: normal})
    wrapped.set_focus_map({None: focus})


def button_row(buttons: list[ActionButton]) -> list:
    """Fixed-width column specs for a set of buttons."""
    return [(b.width, b) for b in buttons]


class WordRow(urwid.WidgetWrap):
    """One word bank entry with speak and delete buttons."""

    def __init__(
        self,
        word: Word,
        on_speak: Callable[[str], None],
        on_delete: Callable[[str], None],
    ):
        self.word = word
        self.id = word.id

        self.speak_button = ActionButton("Speak", lambda: on_speak(word.indonesian))
        self.delete_button = ActionButton("Delete", lambda: on_delete(word.id), danger=True)

        text = urwid.Pile([
            urwid.Text(("word", word.myanmar)),
            urwid.Text([
                ("translation", word.indonesian),
                " ",
                ("word_type", f"({word.type})"),
            ]),
        ])

        columns = urwid.Columns(
            [("weight", 1, text)] + button_row([self.speak_button, self.delete_button]),
            dividechars=1,
        )
        super().__init__(urwid.Pile([columns, urwid.Divider()]))


class SentenceRow(urwid.WidgetWrap):
    """One generated sentence with speak and delete buttons."""

    def __init__(
        self,
        sentence: Sentence,
        on_speak: Callable[[str], None],
        on_delete: Callable[[str], None],
    ):
        self.sentence = sentence
        self.id = sentence.id

        self.speak_button = ActionButton("Speak", lambda: on_speak(sentence.indonesian))
        self.delete_button = ActionButton(
            "Delete", lambda: on_delete(sentence.id), danger=True
        )

        text = urwid.Pile([
            urwid.Text([("word", "Myanmar: "), sentence.myanmar]),
            urwid.Text([("translation", "Indonesian: "), sentence.indonesian]),
        ])

        columns = urwid.Columns(
            [("weight", 1, text)] + button_row([self.speak_button, self.delete_button]),
            dividechars=1,
        )
        super().__init__(urwid.Pile([columns, urwid.Divider()]))


class ErrorBanner(urwid.WidgetWrap):
    """Shows the current error message, or nothing."""

    def __init__(self):
        self.text_widget = urwid.Text("")
        self.attr_map = urwid.AttrMap(self.text_widget, None)
        super().__init__(self.attr_map)

    def set_message(self, message: Optional[str]):
        """Set or clear the message."""
        if message:
            self.text_widget.set_text(f" {message} ")
            self.attr_map.set_attr_map({None: "error"})
        else:
            self.text_widget.set_text("")
            self.attr_map.set_attr_map({None: None})


class StatusBar(urwid.WidgetWrap):
    """A status bar showing hints and messages."""

    def __init__(self, text: str = ""):
        self.text_widget = urwid.Text(text)
        widget = urwid.AttrMap(self.text_widget, "footer")
        super().__init__(widget)

    def set_text(self, text: str):
        """Set the status text."""
        self.text_widget.set_text(text)
