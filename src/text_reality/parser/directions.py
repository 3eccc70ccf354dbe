"""
directions.py

PURPOSE: Recognize single-word direction shortcuts (NORTH, N, SW ...).
DEPENDENCIES: command model

ARCHITECTURE NOTES:
A bare direction is an implicit GO command. Directions are recognized here
independently of the synonym tables, so "north" always works even when a
game never registers it as a noun.
"""

from text_reality.models.command import Command, Direction, VerbCode

# Direction words and abbreviations
DIRECTION_WORDS: dict[str, Direction] = {
    "north": Direction.NORTH,
    "n": Direction.NORTH,
    "south": Direction.SOUTH,
    "s": Direction.SOUTH,
    "east": Direction.EAST,
    "e": Direction.EAST,
    "west": Direction.WEST,
    "w": Direction.WEST,
    "northeast": Direction.NORTHEAST,
    "north-east": Direction.NORTHEAST,
    "ne": Direction.NORTHEAST,
    "northwest": Direction.NORTHWEST,
    "north-west": Direction.NORTHWEST,
    "nw": Direction.NORTHWEST,
    "southeast": Direction.SOUTHEAST,
    "south-east": Direction.SOUTHEAST,
    "se": Direction.SOUTHEAST,
    "southwest": Direction.SOUTHWEST,
    "south-west": Direction.SOUTHWEST,
    "sw": Direction.SOUTHWEST,
    "up": Direction.UP,
    "u": Direction.UP,
    "down": Direction.DOWN,
    "d": Direction.DOWN,
}


def get_direction(word: str | None) -> Direction | None:
    """Return the direction a word denotes, or None."""
    if not word:
        return None
    return DIRECTION_WORDS.get(word.lower())


def get_direction_command(word: str | None) -> Command:
    """
    Turn a single direction word into a GO command.

    Args:
        word: A single lowercased word

    Returns:
        Command(verb=GO, noun=<direction>, full_text=word) for a direction,
        otherwise an empty Command with verb NO_COMMAND
    """
    direction = get_direction(word)
    if direction is None:
        return Command()
    return Command(verb=VerbCode.GO, noun=direction.value, full_text=word or "")
