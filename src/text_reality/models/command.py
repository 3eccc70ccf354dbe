"""
command.py

PURPOSE: Define the Command model and the VerbCode/Preposition/Direction enums.
DEPENDENCIES: None (pure Python + enum)

ARCHITECTURE NOTES:
Commands represent fully reduced player input. The parser produces Command
objects and the room/game controller consumes them. Every slot has a
sentinel default (NO_COMMAND, NOT_RECOGNISED, empty string) so a miss is a
normal value rather than an error.
"""

from dataclasses import dataclass
from enum import Enum, auto


class VerbCode(Enum):
    """
    Canonical verb codes that synonyms reduce to.

    NO_COMMAND is the sentinel returned when nothing matched.
    """

    NO_COMMAND = auto()

    # Movement
    GO = auto()

    # Object manipulation
    TAKE = auto()  # aliases: GET, GRAB, PICKUP
    PICK = auto()  # PICK UP X, PICK LOCK
    DROP = auto()
    PUT = auto()  # PUT X IN/ON Y
    GIVE = auto()  # GIVE X TO Y
    PUSH = auto()
    PULL = auto()
    WEAR = auto()

    # Examination
    LOOK = auto()
    EXAMINE = auto()
    READ = auto()

    # Container/lock operations
    OPEN = auto()
    CLOSE = auto()
    LOCK = auto()
    UNLOCK = auto()

    # Tool use
    USE = auto()  # USE X WITH Y

    # Interaction
    TALK = auto()  # TALK TO X
    ATTACK = auto()
    EAT = auto()
    DRINK = auto()

    # Meta
    INVENTORY = auto()
    WAIT = auto()
    HELP = auto()
    QUIT = auto()


class Preposition(Enum):
    """Prepositions that connect the first and second noun."""

    NOT_RECOGNISED = auto()
    IN = auto()  # PUT key IN box
    ON = auto()  # PUT book ON table
    AT = auto()  # THROW rock AT window
    WITH = auto()  # UNLOCK door WITH key
    TO = auto()  # GIVE coin TO merchant
    FROM = auto()  # TAKE apple FROM basket
    UNDER = auto()  # HIDE note UNDER bed
    OVER = auto()  # THROW rope OVER branch
    BEHIND = auto()  # PUT box BEHIND curtain


class Direction(Enum):
    """Compass directions. The value is the canonical noun for a GO command."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    NORTHEAST = "northeast"
    NORTHWEST = "northwest"
    SOUTHEAST = "southeast"
    SOUTHWEST = "southwest"
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class Command:
    """
    A reduced player command.

    Examples:
        - NORTH -> Command(verb=GO, noun="north")
        - GET KEY -> Command(verb=TAKE, noun="key")
        - PUT KEY IN BOX -> Command(verb=PUT, noun="key",
                                    preposition=IN, noun2="box")

    Attributes:
        verb: Canonical verb code (NO_COMMAND when nothing matched)
        noun: Canonical first noun (empty = absent)
        noun2: Canonical second noun, only set after a recognised preposition
        preposition: Preposition code (NOT_RECOGNISED when absent)
        full_text: The lowercased input line, verbatim
        profanity_detected: True if the profanity filter matched
        profanity_word: The matched term, or empty
    """

    verb: VerbCode = VerbCode.NO_COMMAND
    noun: str = ""
    noun2: str = ""
    preposition: Preposition = Preposition.NOT_RECOGNISED
    full_text: str = ""
    profanity_detected: bool = False
    profanity_word: str = ""

    def __post_init__(self) -> None:
        """Validate command structure."""
        if self.noun2 and self.preposition == Preposition.NOT_RECOGNISED:
            raise ValueError("Command has noun2 but no recognised preposition")

    @property
    def has_verb(self) -> bool:
        return self.verb != VerbCode.NO_COMMAND

    @property
    def has_noun(self) -> bool:
        return bool(self.noun)

    @property
    def has_preposition(self) -> bool:
        return self.preposition != Preposition.NOT_RECOGNISED

    @property
    def is_empty(self) -> bool:
        """True when no grammar slot was filled."""
        return not (self.has_verb or self.has_noun or self.has_preposition or self.noun2)
