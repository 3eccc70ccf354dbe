"""
profanity.py

PURPOSE: Profanity detection capability consumed by the parser.
DEPENDENCIES: None (pure Python + re)

ARCHITECTURE NOTES:
The parser only needs "what is the first banned term in this text, if any".
Any object with a first_match() method satisfies ProfanityDetector, so a
game can plug in a richer matcher. WordListProfanityDetector is the
built-in blocklist: whole-word matching, first occurrence in the text wins.
The parser does not censor anything; it only tags the command.
"""

import logging
import re
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class ProfanityDetector(Protocol):
    """Protocol for profanity detectors."""

    def first_match(self, text: str) -> str | None: ...


# Built-in blocklist. Games extend it with extra_words.
DEFAULT_PROFANITY: frozenset[str] = frozenset(
    {
        "arse",
        "arsehole",
        "ass",
        "asshole",
        "bastard",
        "bitch",
        "bollocks",
        "bugger",
        "bullshit",
        "crap",
        "cunt",
        "damn",
        "dick",
        "dickhead",
        "fuck",
        "fucked",
        "fucker",
        "fucking",
        "goddamn",
        "motherfucker",
        "piss",
        "pissed",
        "prick",
        "shit",
        "shite",
        "slut",
        "twat",
        "wanker",
        "whore",
    }
)


class WordListProfanityDetector:
    """
    Detects banned words using a whole-word regular expression.

    Usage:
        detector = WordListProfanityDetector(extra_words=["frak"])
        detector.first_match("open the frakking door")  # -> None
        detector.first_match("frak this door")  # -> "frak"
    """

    def __init__(
        self,
        words: Iterable[str] | None = None,
        extra_words: Iterable[str] = (),
    ):
        base = DEFAULT_PROFANITY if words is None else words
        self.words: frozenset[str] = frozenset(
            w.strip().lower() for w in [*base, *extra_words] if w.strip()
        )
        self._pattern = self._compile(self.words)

    @staticmethod
    def _compile(words: frozenset[str]) -> re.Pattern[str] | None:
        if not words:
            return None
        # Longest first so "fucking" wins over "fuck" at the same position
        alternatives = "|".join(re.escape(w) for w in sorted(words, key=len, reverse=True))
        return re.compile(rf"(?<![\w])(?:{alternatives})(?![\w])", re.IGNORECASE)

    def first_match(self, text: str) -> str | None:
        """
        Find the first banned word in the text.

        Args:
            text: Lowercased player input

        Returns:
            The matched word (lowercased), or None
        """
        if not text or self._pattern is None:
            return None

        match = self._pattern.search(text)
        if match is None:
            return None

        word = match.group(0).lower()
        logger.debug(f"Profanity matched: '{word}'")
        return word
