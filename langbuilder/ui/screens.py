"""Panels that make up the main screen."""

import urwid

from langbuilder.ui.widgets import (
    ActionButton,
    GuardedEdit,
    SentenceRow,
    WordRow,
    button_row,
    set_edit_enabled,
    styled_edit,
)


class EntryPanel(urwid.WidgetWrap):
    """New word entry: input, Save button and busy indicator."""

    def __init__(self, app):
        self.app = app

        self.edit = GuardedEdit("", on_enter=self._on_save)
        self.edit_box = styled_edit(self.edit)
        self.save_button = ActionButton("Save", self._on_save)
        self.busy_text = urwid.Text("")

        row = urwid.Columns(
            [("weight", 1, self.edit_box)] + button_row([self.save_button]),
            dividechars=2,
        )
        pile = urwid.Pile([
            urwid.Text(("empty", "Enter Myanmar word...")),
            row,
            self.busy_text,
        ])
        super().__init__(urwid.LineBox(pile, title="New Word Entry"))

    def _on_save(self):
        self.app.save_word(self.edit.edit_text)

    def clear(self):
        self.edit.set_edit_text("")

    def refresh(self, busy: bool):
        set_edit_enabled(self.edit_box, not busy)
        self.save_button.set_enabled(not busy)
        self.busy_text.set_text(("busy", "Processing...") if busy else "")


class WordBankPanel(urwid.WidgetWrap):
    """Searchable list of saved words."""

    EMPTY = "No words found. Add some new words!"

    def __init__(self, app):
        self.app = app

        self.search_edit = GuardedEdit("Search: ")
        urwid.connect_signal(self.search_edit, "postchange", self._on_search)

        self.walker = urwid.SimpleFocusListWalker([])
        self.listbox = urwid.ListBox(self.walker)

        pile = urwid.Pile([
            ("pack", styled_edit(self.search_edit)),
            ("pack", urwid.Divider()),
            ("weight", 1, self.listbox),
        ])
        super().__init__(urwid.LineBox(pile, title="Word Bank"))

    @property
    def search_term(self) -> str:
        return self.search_edit.edit_text

    def _on_search(self, edit, old_text):
        self.refresh()

    def refresh(self):
        """Rebuild rows from the current search."""
        words = self.app.session.search(self.search_term)
        self.walker.clear()
        if not words:
            self.walker.append(urwid.Text(("empty", self.EMPTY)))
            return
        for word in words:
            self.walker.append(WordRow(
                word,
                on_speak=self.app.speak,
                on_delete=self.app.delete_word,
            ))


class SentencePanel(urwid.WidgetWrap):
    """AI sentence builder and the list of generated sentences."""

    EMPTY = "No sentences generated yet."

    def __init__(self, app):
        self.app = app

        self.create_button = ActionButton("Create Sentence", self.app.generate_sentence)
        self.busy_text = urwid.Text("")

        self.walker = urwid.SimpleFocusListWalker([])
        self.listbox = urwid.ListBox(self.walker)

        pile = urwid.Pile([
            ("pack", urwid.Columns(button_row([self.create_button]))),
            ("pack", self.busy_text),
            ("weight", 1, self.listbox),
        ])
        super().__init__(urwid.LineBox(pile, title="AI Sentence Builder"))

    def refresh(self, busy: bool):
        session = self.app.session
        self.create_button.set_enabled(not busy and len(session.words) >= 2)
        self.busy_text.set_text(("busy", "Generating sentence...") if busy else "")

        self.walker.clear()
        sentences = session.sentences
        if not sentences:
            self.walker.append(urwid.Text(("empty", self.EMPTY)))
            return
        for sentence in sentences:
            self.walker.append(SentenceRow(
                sentence,
                on_speak=self.app.speak,
                on_delete=self.app.delete_sentence,
            ))


class MainScreen(urwid.WidgetWrap):
    """Error banner, word entry and the two side-by-side panels."""

    def __init__(self, app):
        self.app = app
        self.entry = EntryPanel(app)
        self.word_bank = WordBankPanel(app)
        self.sentences = SentencePanel(app)

        columns = urwid.Columns([
            ("weight", 1, self.word_bank),
            ("weight", 1, self.sentences),
        ], dividechars=2)

        pile = urwid.Pile([
            ("pack", app.error_banner),
            ("pack", self.entry),
            ("weight", 1, columns),
        ])
        super().__init__(pile)

    def refresh(self):
        """Re-render everything from session state."""
        busy = self.app.session.busy
        self.entry.refresh(busy)
        self.word_bank.refresh()
        self.sentences.refresh(busy)
