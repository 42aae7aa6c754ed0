"""Smart Language Builder: AI-assisted Myanmar to Indonesian vocabulary."""

__version__ = "1.0.1"
