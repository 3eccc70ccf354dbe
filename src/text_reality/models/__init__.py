"""Domain models for parsed player commands."""

from text_reality.models.command import Command, Direction, Preposition, VerbCode
from text_reality.models.vocabulary import Vocabulary, load_vocabulary

__all__ = [
    "Command",
    "Direction",
    "Preposition",
    "VerbCode",
    "Vocabulary",
    "load_vocabulary",
]
