"""
Table-driven partial updates.

A patch is a JSON object of wire (camelCase) field names to scalar values.
Each entity has a rule table naming the fields a client may change and the
shape each must have. Keys missing from the table are dropped, so ids,
foreign keys and timestamps can never be written through a patch. Every
recognised key is validated before anything is assigned.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from sqlmodel import SQLModel

from learng.configs import GENERATION_METHODS, JOURNEY_STATUSES
from learng.errors import InvalidRequestBodyError, PatchValidationError
from learng.utils.helpers import utc_now

type PatchValue = str | int | float | bool | None
type PatchMap = Mapping[str, PatchValue]


class FieldKind(StrEnum):
    TEXT = "text"
    REQUIRED_TEXT = "required_text"
    OPTIONAL_TEXT = "optional_text"
    INTEGER = "integer"
    CHOICE = "choice"


@dataclass(frozen=True)
class FieldRule:
    """How one patchable field is validated and where it is stored."""

    attribute: str
    kind: FieldKind
    label: str
    choices: frozenset[str] = frozenset()

    def coerce(self, value: Any) -> PatchValue:
        """
        Check ``value`` against the rule.

        Returns
        -------
        PatchValue
            The value to assign (integral floats become ints).

        Raises
        ------
        PatchValidationError
            If the value has the wrong shape or is outside the domain.
        """
        match self.kind:
            case FieldKind.TEXT:
                if isinstance(value, str):
                    return value
                raise PatchValidationError(self.label, f"{self.label} must be a string")
            case FieldKind.REQUIRED_TEXT:
                if isinstance(value, str) and value.strip():
                    return value
                raise PatchValidationError(self.label, f"{self.label} must be a non-empty string")
            case FieldKind.OPTIONAL_TEXT:
                if value is None or isinstance(value, str):
                    return value
                raise PatchValidationError(self.label, f"{self.label} must be a string or null")
            case FieldKind.INTEGER:
                # bool is an int subclass; JSON true/false is not a number
                if isinstance(value, bool):
                    raise PatchValidationError(self.label, f"{self.label} must be an integer")
                if isinstance(value, int):
                    return value
                if isinstance(value, float) and value.is_integer():
                    return int(value)
                raise PatchValidationError(self.label, f"{self.label} must be an integer")
            case FieldKind.CHOICE:
                if isinstance(value, str) and value in self.choices:
                    return value
                raise PatchValidationError(self.label, f"invalid {self.label}")


JOURNEY_PATCH_RULES: Mapping[str, FieldRule] = {
    "title": FieldRule("title", FieldKind.REQUIRED_TEXT, "title"),
    "description": FieldRule("description", FieldKind.TEXT, "description"),
    "status": FieldRule("status", FieldKind.CHOICE, "status", JOURNEY_STATUSES),
    "sourceLanguage": FieldRule("source_language", FieldKind.REQUIRED_TEXT, "sourceLanguage"),
    "targetLanguage": FieldRule("target_language", FieldKind.REQUIRED_TEXT, "targetLanguage"),
}

SCENARIO_PATCH_RULES: Mapping[str, FieldRule] = {
    "title": FieldRule("title", FieldKind.REQUIRED_TEXT, "title"),
    "description": FieldRule("description", FieldKind.TEXT, "description"),
    "displayOrder": FieldRule("display_order", FieldKind.INTEGER, "displayOrder"),
}

WORD_PATCH_RULES: Mapping[str, FieldRule] = {
    "targetText": FieldRule("target_text", FieldKind.REQUIRED_TEXT, "targetText"),
    "sourceText": FieldRule("source_text", FieldKind.TEXT, "sourceText"),
    "displayOrder": FieldRule("display_order", FieldKind.INTEGER, "displayOrder"),
    "imageUrl": FieldRule("image_url", FieldKind.OPTIONAL_TEXT, "imageUrl"),
    "audioUrl": FieldRule("audio_url", FieldKind.OPTIONAL_TEXT, "audioUrl"),
    "generationMethod": FieldRule(
        "generation_method",
        FieldKind.CHOICE,
        "generation method",
        GENERATION_METHODS,
    ),
}


class PatchMerger:
    """Apply patches to one entity type according to its rule table."""

    def __init__(self, rules: Mapping[str, FieldRule]) -> None:
        self.rules = rules

    def changes(self, patch: object) -> dict[str, PatchValue]:
        """
        Validate ``patch`` and return the attribute assignments it implies.

        Raises
        ------
        InvalidRequestBodyError
            If ``patch`` is not a JSON object.
        PatchValidationError
            On the first recognised key with an invalid value.
        """
        if not isinstance(patch, Mapping):
            raise InvalidRequestBodyError

        return {
            rule.attribute: rule.coerce(value)
            for key, value in patch.items()
            if (rule := self.rules.get(key)) is not None
        }

    def merge[EntityT: SQLModel](self, entity: EntityT, patch: object) -> EntityT:
        """
        Apply ``patch`` to ``entity`` in place.

        Nothing is assigned unless the whole patch is valid.
        """
        changes = self.changes(patch)
        if not changes:
            return entity

        for attribute, value in changes.items():
            setattr(entity, attribute, value)
        if hasattr(entity, "updated_at"):
            setattr(entity, "updated_at", utc_now())  # noqa: B010
        return entity


journey_merger = PatchMerger(JOURNEY_PATCH_RULES)
scenario_merger = PatchMerger(SCENARIO_PATCH_RULES)
word_merger = PatchMerger(WORD_PATCH_RULES)
