"""
reducer.py

PURPOSE: Reduce a list of words to a Command with a four-state machine.
DEPENDENCIES: command model, synonym tables

ARCHITECTURE NOTES:
Grammar shapes supported:
    COMMAND := VERB NOUN
    COMMAND := VERB NOUN PREPOSITION NOUN2

The reducer is a greedy, single-pass, left-to-right machine:

    VERB --verb--> NOUN --noun--> PREPOSITION --prep--> NOUN2

One word is consumed per step. The state only advances when the lookup for
the current state matches; a word that doesn't match is skipped and the
state stays where it is. There is no backtracking and no fifth slot.

All state lives in locals of reduce_words(), so every call starts in VERB with an
empty command and nothing leaks between calls.
"""

from dataclasses import dataclass, replace
from enum import Enum, auto

from text_reality.models.command import Command, Preposition, VerbCode
from text_reality.parser.synonyms import SynonymTable


class ParserState(Enum):
    """Grammar slot the reducer is currently trying to fill."""

    VERB = auto()
    NOUN = auto()
    PREPOSITION = auto()
    NOUN2 = auto()


@dataclass(frozen=True)
class Tables:
    """The synonym tables borrowed for one reduction."""

    verbs: SynonymTable[VerbCode]
    nouns: SynonymTable[str]
    prepositions: SynonymTable[Preposition]


def step(
    state: ParserState,
    word: str,
    command: Command,
    tables: Tables,
) -> tuple[ParserState, Command]:
    """
    Apply one word to the machine.

    Args:
        state: Current state
        word: The next lowercase word
        command: The command accumulated so far
        tables: Synonym tables to look the word up in

    Returns:
        (next_state, command) - unchanged on a miss
    """
    if state == ParserState.VERB:
        verb = tables.verbs.lookup(word)
        if verb != VerbCode.NO_COMMAND:
            return ParserState.NOUN, replace(command, verb=verb)

    elif state == ParserState.NOUN:
        noun = tables.nouns.lookup(word)
        if noun:
            return ParserState.PREPOSITION, replace(command, noun=noun)

    elif state == ParserState.PREPOSITION:
        preposition = tables.prepositions.lookup(word)
        if preposition != Preposition.NOT_RECOGNISED:
            return ParserState.NOUN2, replace(command, preposition=preposition)

    elif state == ParserState.NOUN2:
        noun = tables.nouns.lookup(word)
        if noun:
            return ParserState.NOUN2, replace(command, noun2=noun)

    return state, command


def reduce_words(words: list[str], tables: Tables, command: Command | None = None) -> Command:
    """
    Reduce words to a command, starting from the VERB state.

    Args:
        words: Lowercase words in input order
        tables: Synonym tables for this call
        command: Optional starting command (e.g. one already tagged for profanity)

    Returns:
        The accumulated command. Slots that never matched keep their sentinels.
    """
    state = ParserState.VERB
    result = command if command is not None else Command()

    for word in words:
        state, result = step(state, word, result, tables)

    return result
