"""
lexer.py

PURPOSE: Normalize and tokenize player input for the parser.
DEPENDENCIES: None (pure Python)

ARCHITECTURE NOTES:
The lexer is deliberately small:
- Lowercasing (the synonym tables only hold lowercase keys)
- Splitting on runs of whitespace

Articles and punctuation are NOT stripped. Words the tables don't know are
skipped by the reducer, which is how "the" and "up" drop out of
"pick up the key".
"""


def normalize(text: str | None) -> str:
    """
    Lowercase raw input.

    Args:
        text: Raw player input (None is treated as empty)

    Returns:
        The lowercased text, otherwise unchanged
    """
    if not text:
        return ""
    return text.lower()


def tokenize(text: str | None) -> list[str]:
    """
    Convert input text into a list of lowercase words.

    Args:
        text: Raw player input

    Returns:
        List of words; empty for empty or whitespace-only input
    """
    return normalize(text).split()
