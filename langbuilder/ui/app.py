"""Main application entry point."""

import logging
from typing import Optional

import urwid

from langbuilder import __version__
from langbuilder.ai.gateway import AIGateway
from langbuilder.config import Config, configure_logging, load_config
from langbuilder.core.session import PendingRequest, Session
from langbuilder.core.tts import TextToSpeech
from langbuilder.storage.local import LocalStorage
from langbuilder.storage.persistence import Persistence
from langbuilder.ui.screens import MainScreen
from langbuilder.ui.theme import PALETTE
from langbuilder.ui.widgets import ErrorBanner, StatusBar
from langbuilder.ui.worker import BackgroundRunner


logger = logging.getLogger(__name__)

TITLE = "Smart Language Builder"


def build_session(config: Config) -> Session:
    """Wire storage, gateway and speech from the configuration."""
    persistence = Persistence(LocalStorage(config.data_dir))
    return Session(
        config=config,
        persistence=persistence,
        gateway=AIGateway.from_config(config),
        speech=TextToSpeech(lang=config.speech_lang),
    )


class App:
    """Main application class."""

    def __init__(self, config: Config, session: Optional[Session] = None):
        self.config = config
        self.session = session or build_session(config)
        self.loop: Optional[urwid.MainLoop] = None
        self.runner: Optional[BackgroundRunner] = None

        if not self.session.ai_enabled:
            logger.warning("%s is not set; AI features are disabled", config.key_name)

        self._init_ui()

    def _init_ui(self):
        """Initialize the UI components."""
        self.error_banner = ErrorBanner()
        self.screen = MainScreen(self)
        self.status_bar = StatusBar()

        header = urwid.AttrMap(urwid.Text(f" {TITLE}"), "header")
        self.frame = urwid.Frame(
            header=header,
            body=self.screen,
            footer=self.status_bar,
        )
        self.refresh()

    def refresh(self):
        """Re-render from session state."""
        self.error_banner.set_message(self.session.error)
        self.screen.refresh()
        self.update_status()

    def update_status(self):
        """Update the status bar based on current state."""
        ai_status = "AI: ready" if self.session.ai_enabled else "AI: not configured"
        words = len(self.session.words)
        sentences = len(self.session.sentences)
        self.status_bar.set_text(
            f"v{__version__} | Words: {words} | Sentences: {sentences} | {ai_status}"
            " | [C-g]sentence [Esc]dismiss [?]help [q]uit"
        )

    # Actions

    def _dispatch(self, pending: Optional[PendingRequest]):
        """Run an admitted request, in the background when the loop is up."""
        if pending is None:
            self.refresh()
            return

        self.refresh()

        def on_done(result, error):
            self.session.complete(pending, result=result, error=error)
            if pending.kind == "translate" and error is None:
                self.screen.entry.clear()
            self.refresh()

        if self.runner is None:
            try:
                result = pending.run()
            except Exception as e:
                on_done(None, e)
            else:
                on_done(result, None)
            return

        self.runner.submit(pending.run, on_done)

    def save_word(self, text: str):
        self._dispatch(self.session.begin_save_word(text))

    def generate_sentence(self):
        self._dispatch(self.session.begin_generate_sentence())

    def delete_word(self, id: str):
        self.session.delete_word(id)
        self.refresh()

    def delete_sentence(self, id: str):
        self.session.delete_sentence(id)
        self.refresh()

    def speak(self, text: str):
        self.session.speak(text)
        self.refresh()

    def handle_input(self, key):
        """Handle global key input."""

        # Handle tuple keys (mouse events) - ignore them
        if not isinstance(key, str):
            return

        if key in ("q", "Q", "f10"):
            raise urwid.ExitMainLoop()

        if key == "ctrl g":
            self.generate_sentence()
            return

        if key == "esc":
            self.session.clear_error()
            self.refresh()
            return

        if key == "?":
            self._show_help()
            return

    def _show_help(self):
        """Show help overlay."""
        help_text = f"""
{TITLE}

  Tab / arrows  Move between fields and buttons
  Enter         Save the typed word / press a button
  Ctrl-g        Create a sentence from random words
  Esc           Dismiss the error message
  q, F10        Quit (outside text fields)

Words are translated to Indonesian by the AI.
Sentences use 2-4 random words from your word bank.

Press any key to close...
"""
        text = urwid.Text(help_text)
        filler = urwid.Filler(text, valign="top")
        box = urwid.LineBox(filler, title="Help")
        overlay = urwid.Overlay(
            box,
            self.frame,
            align="center",
            width=60,
            valign="middle",
            height=17,
        )

        def close_help(key):
            self.loop.widget = self.frame
            self.loop.unhandled_input = self.handle_input
            return True

        self.loop.widget = overlay
        self.loop.unhandled_input = close_help

    def run(self):
        """Run the application."""
        self.loop = urwid.MainLoop(
            self.frame,
            palette=PALETTE,
            unhandled_input=self.handle_input,
            handle_mouse=True,
        )
        self.runner = BackgroundRunner(self.loop)

        try:
            self.loop.run()
        except KeyboardInterrupt:
            pass
        finally:
            self.runner.close()
            self.runner = None
            if self.session.speech:
                self.session.speech.shutdown()


def main():
    """Entry point."""
    import argparse

    parser = argparse.ArgumentParser(description=TITLE)
    parser.add_argument(
        "-c", "--config",
        help="Path to config file",
        default=None,
    )
    parser.add_argument(
        "--data-dir",
        help="Directory for the saved words and sentences",
        default=None,
    )
    parser.add_argument(
        "--provider",
        choices=["gemini", "anthropic", "openai"],
        help="AI provider (default: gemini)",
        default=None,
    )
    args = parser.parse_args()

    config = load_config(args.config, data_dir=args.data_dir, provider=args.provider)
    configure_logging(config)

    app = App(config)
    app.run()


if __name__ == "__main__":
    main()
