"""Text-to-Speech for target-language pronunciation."""

import importlib.util
import logging
import platform
import shutil
import subprocess
import tempfile
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Optional


logger = logging.getLogger(__name__)

LINUX_PLAYERS = ["mpv", "mpg123", "ffplay"]


class TTSError(Exception):
    """Error during text-to-speech operation."""
    pass


class TextToSpeech:
    """Text-to-speech using Google TTS (gTTS).

    Utterances are queued on a single worker and played in order with the
    system audio player. The voice locale is fixed at construction.
    """

    def __init__(self, lang: str = "id"):
        """Initialize TTS with language code.

        Args:
            lang: Language code (default: 'id' for Indonesian)
        """
        self.lang = lang
        self._gtts_available: Optional[bool] = None
        self._temp_dir = Path(tempfile.mkdtemp(prefix="langbuilder-tts-"))
        self._queue = ThreadPoolExecutor(max_workers=1, thread_name_prefix="tts")
        self._counter = 0

    def is_available(self) -> bool:
        """Check if gTTS and an audio player are present."""
        if self._gtts_available is None:
            self._gtts_available = importlib.util.find_spec("gtts") is not None
        return self._gtts_available and self._find_player() is not None

    def speak(self, text: str) -> Optional[Future]:
        """Queue the given text for speaking.

        Args:
            text: Text to speak, always voiced with the configured locale

        Returns:
            The queued utterance, or None for blank text

        Raises:
            TTSError: If speech is not supported on this machine
        """
        if not text or not text.strip():
            return None

        if not self.is_available():
            raise TTSError(
                "Text-to-speech not supported. Install gTTS and mpv, mpg123 or ffplay."
            )

        self._counter += 1
        audio_file = self._temp_dir / f"utterance-{self._counter}.mp3"
        future = self._queue.submit(self._say, text.strip(), audio_file)
        future.add_done_callback(self._log_failure)
        return future

    def _say(self, text: str, audio_file: Path) -> None:
        """Synthesize and play one utterance on the worker thread."""
        from gtts import gTTS

        try:
            gTTS(text=text, lang=self.lang, slow=False).save(str(audio_file))
            self._play_audio(audio_file)
        finally:
            audio_file.unlink(missing_ok=True)

    @staticmethod
    def _log_failure(future: Future) -> None:
        error = future.exception()
        if error is not None:
            logger.error("Speech failed: %s", error)

    def _find_player(self) -> Optional[list[str]]:
        """Command prefix for the system audio player, if any."""
        system = platform.system()
        if system == "Darwin":
            return ["afplay"] if shutil.which("afplay") else None
        if system == "Linux":
            for player in LINUX_PLAYERS:
                if shutil.which(player):
                    if player == "ffplay":
                        return [player, "-nodisp", "-autoexit", "-loglevel", "quiet"]
                    if player == "mpv":
                        return [player, "--really-quiet"]
                    return [player, "-q"]
            return None
        if system == "Windows":
            return ["powershell", "-c"]
        return None

    def _play_audio(self, audio_file: Path) -> None:
        """Play audio file using system player.

        Args:
            audio_file: Path to audio file
        """
        command = self._find_player()
        if command is None:
            raise TTSError(f"No audio player found on {platform.system()}")

        if command[0] == "powershell":
            command = command + [
                f"(New-Object Media.SoundPlayer '{audio_file}').PlaySync()"
            ]
        else:
            command = command + [str(audio_file)]

        try:
            subprocess.run(command, check=True, capture_output=True)
        except subprocess.CalledProcessError as e:
            raise TTSError(f"Audio playback failed: {e}")

    def shutdown(self) -> None:
        """Finish queued utterances and remove temporary files."""
        self._queue.shutdown(wait=True)
        shutil.rmtree(self._temp_dir, ignore_errors=True)
