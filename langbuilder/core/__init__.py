"""Core business logic - UI independent."""
from .models import Word, Sentence, Translation, GeneratedSentence
from .vocabulary import VocabularyStore
from .sentences import SentenceStore

# Note: Session is imported directly where needed to avoid circular imports
# with the ai and storage packages

__all__ = [
    "Word",
    "Sentence",
    "Translation",
    "GeneratedSentence",
    "VocabularyStore",
    "SentenceStore",
]
