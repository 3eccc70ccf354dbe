"""
parser.py

PURPOSE: Parse raw player input into Command objects.
DEPENDENCIES: lexer, synonyms, directions, profanity, reducer, command model

ARCHITECTURE NOTES:
The Parser is the facade the room/game controller talks to. It owns the
three synonym tables and the profanity detector, and for each line:

1. Lowercases the input
2. Tags profanity (whole line, once, if the filter is enabled)
3. Splits on whitespace
4. Dispatches on word count:
   - 0 words: empty command
   - 1 word:  direction shortcut, else verb lookup
   - 2+ words: the four-state reducer
5. Attaches the lowercased full text

The grammar is:
    COMMAND := VERB NOUN
    COMMAND := VERB NOUN PREPOSITION NOUN

So GET KEY, GRAB KEY and PICKUP KEY all reduce to Command(verb=TAKE, noun="key").

parse_command never raises for player text. A miss anywhere is a sentinel
value in the result, not an error.
"""

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from text_reality.models.command import Command, Preposition, VerbCode
from text_reality.observability import get_tracer
from text_reality.parser.directions import get_direction_command
from text_reality.parser.lexer import normalize, tokenize
from text_reality.parser.profanity import ProfanityDetector, WordListProfanityDetector
from text_reality.parser.reducer import Tables, reduce_words
from text_reality.parser.synonyms import (
    SynonymTable,
    noun_synonyms,
    preposition_mapping,
    verb_synonyms,
)

if TYPE_CHECKING:
    from text_reality.config import ParserSettings
    from text_reality.models.vocabulary import Vocabulary

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)


class Parser:
    """
    Reduces player input to canonical commands.

    Usage:
        parser = Parser()
        parser.nouns.add_many("key", "key", "brass")
        command = parser.parse_command("Get the brass key")
        # Command(verb=TAKE, noun="key", full_text="get the brass key")
    """

    def __init__(
        self,
        verbs: SynonymTable[VerbCode] | None = None,
        nouns: SynonymTable[str] | None = None,
        prepositions: SynonymTable[Preposition] | None = None,
        profanity_detector: ProfanityDetector | None = None,
        enable_profanity_filter: bool = True,
    ):
        """
        Initialize the parser.

        Args:
            verbs: Verb synonyms (standard vocabulary if omitted)
            nouns: Noun synonyms (direction nouns if omitted)
            prepositions: Preposition mapping (standard prepositions if omitted)
            profanity_detector: Detector to tag profanity with
            enable_profanity_filter: Whether to scan input for profanity
        """
        self._verbs = verbs if verbs is not None else verb_synonyms()
        self._nouns = nouns if nouns is not None else noun_synonyms()
        self._prepositions = prepositions if prepositions is not None else preposition_mapping()
        self._profanity_detector = profanity_detector or WordListProfanityDetector()
        self.enable_profanity_filter = enable_profanity_filter

    @classmethod
    def from_vocabulary(cls, vocabulary: "Vocabulary", defaults: bool = True, **kwargs) -> "Parser":
        """
        Create a parser with a game vocabulary registered on top of the tables.

        Args:
            vocabulary: Game-specific synonyms
            defaults: Whether to start from the standard vocabulary
            **kwargs: Passed through to the constructor
        """
        verbs = verb_synonyms(defaults)
        nouns = noun_synonyms(defaults)
        prepositions = preposition_mapping(defaults)
        vocabulary.apply(verbs, nouns, prepositions)
        logger.debug(f"Registered {vocabulary.word_count} vocabulary words")
        return cls(verbs=verbs, nouns=nouns, prepositions=prepositions, **kwargs)

    @classmethod
    def from_settings(cls, settings: "ParserSettings") -> "Parser":
        """
        Create a parser from configuration.

        Raises:
            json.JSONDecodeError / pydantic.ValidationError: If the configured
                vocabulary file is invalid
        """
        from text_reality.models.vocabulary import Vocabulary, load_vocabulary

        vocabulary = (
            load_vocabulary(settings.vocabulary_file)
            if settings.vocabulary_file
            else Vocabulary()
        )
        return cls.from_vocabulary(
            vocabulary,
            defaults=settings.default_vocabulary,
            profanity_detector=WordListProfanityDetector(extra_words=settings.extra_profanity),
            enable_profanity_filter=settings.profanity_filter,
        )

    @property
    def verbs(self) -> SynonymTable[VerbCode]:
        return self._verbs

    @property
    def nouns(self) -> SynonymTable[str]:
        return self._nouns

    @property
    def prepositions(self) -> SynonymTable[Preposition]:
        return self._prepositions

    @property
    def profanity_detector(self) -> ProfanityDetector:
        return self._profanity_detector

    def parse_command(self, raw_input: str | None) -> Command:
        """
        Parse player input into a Command.

        Args:
            raw_input: Raw player input string (None is treated as empty)

        Returns:
            The reduced Command. Never raises for player text.
        """
        if not raw_input:
            return Command(full_text="")

        with tracer.start_as_current_span("parser.parse_command") as span:
            lower_case = normalize(raw_input)
            words = tokenize(lower_case)
            span.set_attribute("parser.word_count", len(words))

            command = Command()
            if self.enable_profanity_filter:
                command = self._tag_profanity(command, lower_case)

            if not words:
                path = "empty"
            elif len(words) == 1:
                path = "single"
                command = self._single_word_command(command, words[0])
            else:
                path = "multi"
                command = reduce_words(words, self._tables(), command)

            command = replace(command, full_text=lower_case)

            span.set_attribute("parser.path", path)
            span.set_attribute("parser.verb", command.verb.name)
            logger.debug(
                f"Parsed '{lower_case}' via {path} path -> "
                f"verb={command.verb.name} noun='{command.noun}' "
                f"prep={command.preposition.name} noun2='{command.noun2}'"
            )
            return command

    def _tables(self) -> Tables:
        return Tables(verbs=self._verbs, nouns=self._nouns, prepositions=self._prepositions)

    def _single_word_command(self, command: Command, word: str) -> Command:
        """Direction shortcut first, then the verb table."""
        direction = get_direction_command(word)
        if direction.verb != VerbCode.NO_COMMAND:
            return replace(command, verb=direction.verb, noun=direction.noun)
        return replace(command, verb=self._verbs.lookup(word))

    def _tag_profanity(self, command: Command, lower_case: str) -> Command:
        """Scan the whole line for profanity and tag the command."""
        try:
            profanity = self._profanity_detector.first_match(lower_case)
        except Exception as e:
            logger.warning(f"Profanity detector failed, treating input as clean: {e}")
            return command

        if not profanity:
            return command

        logger.debug(f"Profanity detected: '{profanity}'")
        return replace(command, profanity_detected=True, profanity_word=profanity)
