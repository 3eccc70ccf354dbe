"""
synonyms.py

PURPOSE: Synonym tables that reduce player vocabulary to canonical values.
DEPENDENCIES: command model

ARCHITECTURE NOTES:
Each table is a plain dict from lowercase alias to canonical value with a
per-table "not found" value:
- verbs: alias -> VerbCode (miss -> NO_COMMAND)
- nouns: alias -> canonical noun string (miss -> "")
- prepositions: alias -> Preposition (miss -> NOT_RECOGNISED)

Tables are filled at setup time and only read during parsing.
"""

from typing import Generic, TypeVar

from text_reality.models.command import Direction, Preposition, VerbCode

T = TypeVar("T")


class SynonymTable(Generic[T]):
    """
    Many-to-one mapping of aliases to a canonical value.

    Usage:
        nouns = SynonymTable[str](missing="")
        nouns.add_many("lightswitch", "light", "switch")
        nouns.lookup("switch")  # -> "lightswitch"
    """

    def __init__(self, missing: T):
        self.missing = missing
        self._entries: dict[str, T] = {}

    def add(self, alias: str, canonical: T) -> None:
        """Register an alias. A later add for the same alias wins."""
        self._entries[alias.strip().lower()] = canonical

    def add_many(self, canonical: T, *aliases: str) -> None:
        """Register several aliases for one canonical value."""
        for alias in aliases:
            self.add(alias, canonical)

    def lookup(self, word: str | None) -> T:
        """Return the canonical value for a word, or the table's missing value."""
        if not word:
            return self.missing
        return self._entries.get(word, self.missing)

    def aliases_for(self, canonical: T) -> list[str]:
        """All aliases that reduce to the given canonical value."""
        return [alias for alias, value in self._entries.items() if value == canonical]

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SynonymTable(entries={len(self._entries)}, missing={self.missing!r})"


# Standard verb vocabulary
DEFAULT_VERBS: dict[VerbCode, tuple[str, ...]] = {
    VerbCode.GO: ("go", "walk", "run", "move", "travel", "head"),
    VerbCode.TAKE: ("take", "get", "grab", "pickup", "collect", "acquire"),
    VerbCode.PICK: ("pick",),
    VerbCode.DROP: ("drop", "discard", "dump"),
    VerbCode.PUT: ("put", "place", "insert", "set"),
    VerbCode.GIVE: ("give", "hand", "offer"),
    VerbCode.PUSH: ("push", "press", "shove"),
    VerbCode.PULL: ("pull", "tug", "yank"),
    VerbCode.WEAR: ("wear", "don"),
    VerbCode.LOOK: ("look", "l"),
    VerbCode.EXAMINE: ("examine", "x", "inspect", "check", "study"),
    VerbCode.READ: ("read",),
    VerbCode.OPEN: ("open",),
    VerbCode.CLOSE: ("close", "shut"),
    VerbCode.LOCK: ("lock",),
    VerbCode.UNLOCK: ("unlock",),
    VerbCode.USE: ("use", "operate", "flick", "switch"),
    VerbCode.TALK: ("talk", "speak", "say", "chat"),
    VerbCode.ATTACK: ("attack", "hit", "kill", "fight", "punch", "kick"),
    VerbCode.EAT: ("eat", "consume"),
    VerbCode.DRINK: ("drink", "sip"),
    VerbCode.INVENTORY: ("inventory", "inv", "i"),
    VerbCode.WAIT: ("wait", "z"),
    VerbCode.HELP: ("help", "?"),
    VerbCode.QUIT: ("quit", "q"),
}

# Preposition mappings
DEFAULT_PREPOSITIONS: dict[Preposition, tuple[str, ...]] = {
    Preposition.IN: ("in", "into", "inside"),
    Preposition.ON: ("on", "onto", "upon"),
    Preposition.AT: ("at",),
    Preposition.WITH: ("with", "using"),
    Preposition.TO: ("to", "towards", "toward"),
    Preposition.FROM: ("from",),
    Preposition.UNDER: ("under", "beneath", "below", "underneath"),
    Preposition.OVER: ("over", "above"),
    Preposition.BEHIND: ("behind",),
}

# Direction nouns so that "go north" reduces without game-specific setup
DEFAULT_NOUNS: dict[str, tuple[str, ...]] = {
    Direction.NORTH.value: ("north", "n"),
    Direction.SOUTH.value: ("south", "s"),
    Direction.EAST.value: ("east", "e"),
    Direction.WEST.value: ("west", "w"),
    Direction.NORTHEAST.value: ("northeast", "ne"),
    Direction.NORTHWEST.value: ("northwest", "nw"),
    Direction.SOUTHEAST.value: ("southeast", "se"),
    Direction.SOUTHWEST.value: ("southwest", "sw"),
    Direction.UP.value: ("up", "u"),
    Direction.DOWN.value: ("down", "d"),
}


def verb_synonyms(defaults: bool = True) -> SynonymTable[VerbCode]:
    """Create a verb table, optionally seeded with the standard vocabulary."""
    table = SynonymTable[VerbCode](missing=VerbCode.NO_COMMAND)
    if defaults:
        for verb, aliases in DEFAULT_VERBS.items():
            table.add_many(verb, *aliases)
    return table


def noun_synonyms(defaults: bool = True) -> SynonymTable[str]:
    """Create a noun table, optionally seeded with the direction nouns."""
    table = SynonymTable[str](missing="")
    if defaults:
        for noun, aliases in DEFAULT_NOUNS.items():
            table.add_many(noun, *aliases)
    return table


def preposition_mapping(defaults: bool = True) -> SynonymTable[Preposition]:
    """Create a preposition table, optionally seeded with the standard aliases."""
    table = SynonymTable[Preposition](missing=Preposition.NOT_RECOGNISED)
    if defaults:
        for preposition, aliases in DEFAULT_PREPOSITIONS.items():
            table.add_many(preposition, *aliases)
    return table
