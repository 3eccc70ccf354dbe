"""
conftest.py

Shared pytest fixtures for text_reality tests.
"""

import json
from pathlib import Path

import pytest

from text_reality.models.command import Preposition, VerbCode
from text_reality.models.vocabulary import Vocabulary
from text_reality.parser.parser import Parser
from text_reality.parser.synonyms import (
    SynonymTable,
    noun_synonyms,
    preposition_mapping,
    verb_synonyms,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class RecordingDetector:
    """Profanity detector that records every call."""

    def __init__(self, match: str | None = None):
        self.match = match
        self.calls: list[str] = []

    def first_match(self, text: str) -> str | None:
        self.calls.append(text)
        return self.match


@pytest.fixture
def vocabulary_path() -> Path:
    """Path to the sample vocabulary JSON file."""
    return FIXTURES_DIR / "vocabulary.json"


@pytest.fixture
def invalid_vocabulary_path() -> Path:
    """Path to a vocabulary file with an unknown verb code."""
    return FIXTURES_DIR / "invalid_vocabulary.json"


@pytest.fixture
def vocabulary_dict(vocabulary_path: Path) -> dict:
    """Load the sample vocabulary as a dictionary."""
    with open(vocabulary_path) as f:
        return json.load(f)


@pytest.fixture
def vocabulary(vocabulary_dict: dict) -> Vocabulary:
    """Load and validate the sample vocabulary."""
    return Vocabulary.model_validate(vocabulary_dict)


@pytest.fixture
def empty_verbs() -> SynonymTable[VerbCode]:
    return verb_synonyms(defaults=False)


@pytest.fixture
def empty_nouns() -> SynonymTable[str]:
    return noun_synonyms(defaults=False)


@pytest.fixture
def empty_prepositions() -> SynonymTable[Preposition]:
    return preposition_mapping(defaults=False)


@pytest.fixture
def bare_parser(
    empty_verbs: SynonymTable[VerbCode],
    empty_nouns: SynonymTable[str],
    empty_prepositions: SynonymTable[Preposition],
) -> Parser:
    """A parser whose tables start empty, for tests that register their own words."""
    return Parser(verbs=empty_verbs, nouns=empty_nouns, prepositions=empty_prepositions)


@pytest.fixture
def game_parser() -> Parser:
    """The standard vocabulary plus a few game nouns."""
    parser = Parser()
    parser.nouns.add_many("key", "key", "brass")
    parser.nouns.add_many("box", "box", "chest")
    parser.nouns.add_many("lightswitch", "lightswitch", "light", "switch")
    parser.nouns.add("door", "door")
    parser.nouns.add("merchant", "merchant")
    return parser


@pytest.fixture
def recording_detector() -> RecordingDetector:
    return RecordingDetector()


@pytest.fixture
def make_detector():
    """Factory for RecordingDetector instances with a fixed answer."""
    return RecordingDetector
