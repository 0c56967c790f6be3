"""
Conversion options.

Options are serialized with the camelCase keys used by stored sessions
(`condition`, `ignoreEdition`, `forceCondition`). Values outside the
accepted set are rejected, never coerced.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from mtgconverter.models.errors import InvalidOptionError


class Condition(str, Enum):
    """Card condition grades accepted by LigaMagic."""

    NEAR_MINT = "nm"
    SLIGHTLY_PLAYED = "sp"
    MODERATELY_PLAYED = "mp"
    HEAVILY_PLAYED = "hp"
    DAMAGED = "dm"

    @property
    def label(self) -> str:
        return CONDITION_LABELS[self]

    @classmethod
    def parse(cls, value: object) -> Condition:
        """
        Parse a condition code.

        Raises:
            InvalidOptionError: If value is not one of the five codes
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            allowed = ", ".join(c.value for c in cls)
            raise InvalidOptionError("condition", value, f"expected one of {allowed}") from e


CONDITION_LABELS: dict[Condition, str] = {
    Condition.NEAR_MINT: "Near Mint",
    Condition.SLIGHTLY_PLAYED: "Slightly Played",
    Condition.MODERATELY_PLAYED: "Moderately Played",
    Condition.HEAVILY_PLAYED: "Heavily Played",
    Condition.DAMAGED: "Damaged",
}

# Option keys understood by the current schema
OPTION_FIELDS = frozenset({"condition", "ignoreEdition", "forceCondition"})


@dataclass(frozen=True, slots=True)
class ConversionOptions:
    """
    How records are rendered into LigaMagic lines.

    Attributes:
        condition: Grade written when force_condition is set
        ignore_edition: Omit the edition tag
        force_condition: Emit the condition tag for every line
    """

    condition: Condition = Condition.NEAR_MINT
    ignore_edition: bool = False
    force_condition: bool = False

    def __post_init__(self) -> None:
        # Normalizes plain strings and rejects anything outside the enum
        object.__setattr__(self, "condition", Condition.parse(self.condition))
        for name in ("ignore_edition", "force_condition"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise InvalidOptionError(name, value, "expected a boolean")

    def to_dict(self) -> dict[str, Any]:
        return {
            "condition": self.condition.value,
            "ignoreEdition": self.ignore_edition,
            "forceCondition": self.force_condition,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ConversionOptions:
        """
        Build options from their serialized form.

        Missing keys fall back to defaults. Unknown keys must have been
        stripped by migration beforehand; they are ignored here.

        Raises:
            InvalidOptionError: If a value is outside the accepted set
        """
        defaults = cls()
        return cls(
            condition=data.get("condition", defaults.condition),
            ignore_edition=data.get("ignoreEdition", defaults.ignore_edition),
            force_condition=data.get("forceCondition", defaults.force_condition),
        )


DEFAULT_OPTIONS = ConversionOptions()
