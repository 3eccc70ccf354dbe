"""Parser module for text adventure commands."""

from text_reality.parser.directions import DIRECTION_WORDS, get_direction, get_direction_command
from text_reality.parser.lexer import normalize, tokenize
from text_reality.parser.parser import Parser
from text_reality.parser.profanity import ProfanityDetector, WordListProfanityDetector
from text_reality.parser.reducer import ParserState, Tables, reduce_words, step
from text_reality.parser.synonyms import (
    SynonymTable,
    noun_synonyms,
    preposition_mapping,
    verb_synonyms,
)

__all__ = [
    "DIRECTION_WORDS",
    "Parser",
    "ParserState",
    "ProfanityDetector",
    "SynonymTable",
    "Tables",
    "WordListProfanityDetector",
    "get_direction",
    "get_direction_command",
    "normalize",
    "noun_synonyms",
    "preposition_mapping",
    "reduce_words",
    "step",
    "tokenize",
    "verb_synonyms",
]
