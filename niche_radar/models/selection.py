"""
The user's questionnaire answers.

``SelectionSet`` is the **only** mutable model in the system: the wizard
session fills it one field per step.  A field, once set, is locked until
``reset()`` empties the whole set; there is no per-step undo.

Values are plain strings rather than enums.  The session places no
validation on them; the scoring engine rejects an unknown ``spec`` or
``size`` and the consortium matcher falls back to its default for an
unknown ``spec``.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from niche_radar.taxonomy.selection_taxonomy import SELECTION_FIELDS


class SelectionLockedError(ValueError):
    """Raised when a selection field that is already set is written again.

    Attributes:
        field: Name of the locked field.
    """

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(
            f"Selection '{field}' is already set.  Reset the session to change it."
        )


class SelectionSet(BaseModel):
    """The four questionnaire answers.

    Attributes:
        spec:    Specialization value, e.g. ``"corporate_ma"``.
        size:    Firm size value, e.g. ``"medium"``.
        intl:    International exposure value, e.g. ``"mixed"``.
        pricing: Pricing model value, e.g. ``"premium"``.
    """

    model_config = ConfigDict(validate_assignment=True)

    spec: Optional[str] = None
    size: Optional[str] = None
    intl: Optional[str] = None
    pricing: Optional[str] = None

    def set(self, field: str, value: str) -> None:
        """Record ``value`` for ``field``.

        Raises:
            KeyError: If ``field`` is not one of the four selection fields.
            SelectionLockedError: If ``field`` already holds a value.
        """
        if field not in SELECTION_FIELDS:
            raise KeyError(
                f"Unknown selection field '{field}'. Must be one of {list(SELECTION_FIELDS)}."
            )
        if getattr(self, field) is not None:
            raise SelectionLockedError(field)
        setattr(self, field, str(value))

    def reset(self) -> None:
        """Clear all four fields."""
        for field in SELECTION_FIELDS:
            setattr(self, field, None)

    def missing_fields(self) -> list[str]:
        """Names of unset fields, in step order."""
        return [f for f in SELECTION_FIELDS if getattr(self, f) is None]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()

    @property
    def is_empty(self) -> bool:
        return len(self.missing_fields()) == len(SELECTION_FIELDS)
