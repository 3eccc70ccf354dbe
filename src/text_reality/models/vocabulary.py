"""
vocabulary.py

PURPOSE: Pydantic model for game-specific synonym definitions.
DEPENDENCIES: pydantic, command model

ARCHITECTURE NOTES:
A game registers its own words on top of the standard vocabulary (a hallway
game adds "light" and "switch" as aliases for "lightswitch"). Instead of
hand-written add() calls, the words can live in a JSON file:

    {
      "verbs": {"yank": "pull"},
      "nouns": {"lightswitch": ["light", "switch"]},
      "prepositions": {"inside": "in"}
    }

Vocabulary files are validated against this model when loaded, so a typo in
a verb code fails at setup time instead of silently never matching.
"""

import json
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, field_validator

from text_reality.models.command import Preposition, VerbCode

if TYPE_CHECKING:
    from text_reality.parser.synonyms import SynonymTable


def _lower_keys(value: object) -> dict[str, object]:
    if not isinstance(value, dict):
        raise ValueError("Expected a mapping of alias -> value")
    return {str(k).strip().lower(): v for k, v in value.items()}


class Vocabulary(BaseModel):
    """Game-specific verb, noun and preposition synonyms."""

    verbs: dict[str, VerbCode] = Field(
        default_factory=dict,
        description="Map of alias -> verb code name (e.g. 'yank': 'pull')",
    )
    nouns: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Map of canonical noun -> aliases",
    )
    prepositions: dict[str, Preposition] = Field(
        default_factory=dict,
        description="Map of alias -> preposition name (e.g. 'inside': 'in')",
    )

    @field_validator("verbs", mode="before")
    @classmethod
    def parse_verb_codes(cls, v: object) -> dict[str, object]:
        """Accept verb code names case-insensitively."""
        result: dict[str, object] = {}
        for alias, code in _lower_keys(v).items():
            if isinstance(code, str):
                name = code.strip().upper()
                if name not in VerbCode.__members__:
                    raise ValueError(f"Unknown verb code '{code}' for alias '{alias}'")
                code = VerbCode[name]
            result[alias] = code
        return result

    @field_validator("prepositions", mode="before")
    @classmethod
    def parse_prepositions(cls, v: object) -> dict[str, object]:
        """Accept preposition names case-insensitively."""
        result: dict[str, object] = {}
        for alias, prep in _lower_keys(v).items():
            if isinstance(prep, str):
                name = prep.strip().upper()
                if name not in Preposition.__members__:
                    raise ValueError(f"Unknown preposition '{prep}' for alias '{alias}'")
                prep = Preposition[name]
            result[alias] = prep
        return result

    @field_validator("verbs")
    @classmethod
    def reject_no_command(cls, v: dict[str, VerbCode]) -> dict[str, VerbCode]:
        """Runs after coercion so integer codes are checked too."""
        for alias, code in v.items():
            if code == VerbCode.NO_COMMAND:
                raise ValueError(f"Alias '{alias}' cannot map to NO_COMMAND")
        return v

    @field_validator("prepositions")
    @classmethod
    def reject_not_recognised(cls, v: dict[str, Preposition]) -> dict[str, Preposition]:
        """Runs after coercion so integer values are checked too."""
        for alias, prep in v.items():
            if prep == Preposition.NOT_RECOGNISED:
                raise ValueError(f"Alias '{alias}' cannot map to NOT_RECOGNISED")
        return v

    @field_validator("nouns")
    @classmethod
    def validate_nouns(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        """Lowercase noun names and reject blank entries."""
        result: dict[str, list[str]] = {}
        for noun, aliases in v.items():
            canonical = noun.strip().lower()
            if not canonical:
                raise ValueError("Noun names cannot be empty")
            cleaned = [a.strip().lower() for a in aliases]
            if any(not a for a in cleaned):
                raise ValueError(f"Noun '{canonical}' has an empty alias")
            result[canonical] = cleaned
        return result

    def apply(
        self,
        verbs: "SynonymTable[VerbCode]",
        nouns: "SynonymTable[str]",
        prepositions: "SynonymTable[Preposition]",
    ) -> None:
        """Register every synonym in the given tables."""
        for alias, verb in self.verbs.items():
            verbs.add(alias, verb)
        for noun, aliases in self.nouns.items():
            nouns.add_many(noun, noun, *aliases)
        for alias, prep in self.prepositions.items():
            prepositions.add(alias, prep)

    @property
    def word_count(self) -> int:
        """Total number of aliases defined."""
        noun_aliases = sum(len(aliases) + 1 for aliases in self.nouns.values())
        return len(self.verbs) + noun_aliases + len(self.prepositions)


def load_vocabulary(path: Path) -> Vocabulary:
    """
    Load and validate a vocabulary JSON file.

    Raises:
        json.JSONDecodeError: If the file is not valid JSON
        pydantic.ValidationError: If the content doesn't match the model
    """
    with open(path) as f:
        data = json.load(f)
    return Vocabulary.model_validate(data)
