"""
TEST DOC: Command Reducer

WHAT: Tests for the four-state verb/noun/preposition/noun2 machine
WHY: The reducer decides which words fill which grammar slot
HOW: Drive step() and reduce_words() with small hand-built tables

CASES:
- Each transition on a match
- Skip-and-continue on a miss
- Full four-slot reduction
- Starting command is carried through (profanity tags survive)

EDGE CASES:
- No words
- No word matches anything
- Extra nouns after noun2 overwrite noun2, no fifth slot
- A word that is both a verb and a noun is only tried in the current state
- Very long inputs
"""

import pytest

from text_reality.models.command import Command, Preposition, VerbCode
from text_reality.parser.reducer import ParserState, Tables, reduce_words, step
from text_reality.parser.synonyms import noun_synonyms, preposition_mapping, verb_synonyms


@pytest.fixture
def tables() -> Tables:
    verbs = verb_synonyms(defaults=False)
    verbs.add("put", VerbCode.PUT)
    verbs.add("pick", VerbCode.PICK)
    verbs.add_many(VerbCode.TAKE, "get", "grab", "pickup")

    nouns = noun_synonyms(defaults=False)
    nouns.add("key", "key")
    nouns.add_many("box", "box", "chest")
    nouns.add("table", "table")

    prepositions = preposition_mapping(defaults=False)
    prepositions.add("in", Preposition.IN)
    prepositions.add("on", Preposition.ON)

    return Tables(verbs=verbs, nouns=nouns, prepositions=prepositions)


class TestStep:
    """Tests for the transition function."""

    def test_verb_match_advances(self, tables: Tables):
        state, command = step(ParserState.VERB, "put", Command(), tables)
        assert state == ParserState.NOUN
        assert command.verb == VerbCode.PUT

    def test_verb_miss_stays(self, tables: Tables):
        state, command = step(ParserState.VERB, "please", Command(), tables)
        assert state == ParserState.VERB
        assert command == Command()

    def test_noun_match_advances(self, tables: Tables):
        state, command = step(ParserState.NOUN, "chest", Command(), tables)
        assert state == ParserState.PREPOSITION
        assert command.noun == "box"

    def test_noun_miss_stays(self, tables: Tables):
        state, command = step(ParserState.NOUN, "the", Command(), tables)
        assert state == ParserState.NOUN
        assert command.noun == ""

    def test_preposition_match_advances(self, tables: Tables):
        state, command = step(ParserState.PREPOSITION, "in", Command(), tables)
        assert state == ParserState.NOUN2
        assert command.preposition == Preposition.IN

    def test_preposition_miss_stays(self, tables: Tables):
        state, command = step(ParserState.PREPOSITION, "box", Command(), tables)
        assert state == ParserState.PREPOSITION
        assert command.preposition == Preposition.NOT_RECOGNISED

    def test_noun2_match_stays_in_noun2(self, tables: Tables):
        start = Command(preposition=Preposition.IN)
        state, command = step(ParserState.NOUN2, "box", start, tables)
        assert state == ParserState.NOUN2
        assert command.noun2 == "box"

    def test_noun2_miss_stays(self, tables: Tables):
        start = Command(preposition=Preposition.IN)
        state, command = step(ParserState.NOUN2, "the", start, tables)
        assert state == ParserState.NOUN2
        assert command == start

    def test_step_does_not_mutate_input(self, tables: Tables):
        start = Command()
        step(ParserState.VERB, "put", start, tables)
        assert start.verb == VerbCode.NO_COMMAND


class TestReduceWords:
    """Tests for the full reduction loop."""

    def test_four_slot_reduction(self, tables: Tables):
        command = reduce_words(["put", "key", "in", "box"], tables)
        assert command.verb == VerbCode.PUT
        assert command.noun == "key"
        assert command.preposition == Preposition.IN
        assert command.noun2 == "box"

    def test_verb_and_noun(self, tables: Tables):
        command = reduce_words(["get", "key"], tables)
        assert command.verb == VerbCode.TAKE
        assert command.noun == "key"
        assert command.preposition == Preposition.NOT_RECOGNISED
        assert command.noun2 == ""

    def test_skip_and_continue(self, tables: Tables):
        """Unknown words are skipped without changing state."""
        command = reduce_words(["pick", "up", "the", "shiny", "key"], tables)
        assert command.verb == VerbCode.PICK
        assert command.noun == "key"

    def test_leading_noise_before_verb(self, tables: Tables):
        command = reduce_words(["please", "get", "key"], tables)
        assert command.verb == VerbCode.TAKE
        assert command.noun == "key"

    def test_verb_only(self, tables: Tables):
        command = reduce_words(["get", "lamp"], tables)
        assert command.verb == VerbCode.TAKE
        assert command.noun == ""

    def test_no_matches(self, tables: Tables):
        command = reduce_words(["xyzzy", "plugh"], tables)
        assert command == Command()

    def test_no_words(self, tables: Tables):
        assert reduce_words([], tables) == Command()

    def test_noun_before_verb_is_skipped(self, tables: Tables):
        """No backtracking: a noun seen in the VERB state is not retried later."""
        command = reduce_words(["key", "get"], tables)
        assert command.verb == VerbCode.TAKE
        assert command.noun == ""

    def test_preposition_without_noun2(self, tables: Tables):
        command = reduce_words(["put", "key", "in"], tables)
        assert command.preposition == Preposition.IN
        assert command.noun2 == ""

    def test_preposition_before_noun_is_skipped(self, tables: Tables):
        """'in' is not a noun, so it is skipped while looking for the first noun."""
        command = reduce_words(["put", "in", "box"], tables)
        assert command.noun == "box"
        assert command.preposition == Preposition.NOT_RECOGNISED

    def test_second_noun_without_preposition_is_ignored(self, tables: Tables):
        command = reduce_words(["put", "key", "box"], tables)
        assert command.noun == "key"
        assert command.noun2 == ""

    def test_no_fifth_slot(self, tables: Tables):
        """Words after noun2 can only overwrite noun2."""
        command = reduce_words(["put", "key", "in", "box", "on", "table"], tables)
        assert command.preposition == Preposition.IN
        assert command.noun2 == "table"

    def test_second_verb_ignored(self, tables: Tables):
        command = reduce_words(["get", "put", "key"], tables)
        assert command.verb == VerbCode.TAKE
        assert command.noun == "key"

    def test_starting_command_is_kept(self, tables: Tables):
        start = Command(profanity_detected=True, profanity_word="damn")
        command = reduce_words(["get", "key"], tables, start)
        assert command.profanity_detected
        assert command.profanity_word == "damn"
        assert command.verb == VerbCode.TAKE

    def test_each_call_starts_fresh(self, tables: Tables):
        first = reduce_words(["put", "key", "in", "box"], tables)
        second = reduce_words(["table"], tables)
        assert first.noun2 == "box"
        assert second == Command()

    def test_long_input(self, tables: Tables):
        """Iterative processing handles arbitrarily long lines."""
        words = ["get"] + ["the"] * 50_000 + ["key"]
        command = reduce_words(words, tables)
        assert command.verb == VerbCode.TAKE
        assert command.noun == "key"
