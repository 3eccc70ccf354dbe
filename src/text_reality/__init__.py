"""
Text Reality - natural-language command interpreter for text adventures.

This package provides tools for:
- Reducing free-form player input to canonical verb/noun/preposition commands
- Registering game-specific synonyms
- Tagging profanity in player input
"""

__version__ = "0.1.0"
