"""
Core Data Models for the Expense Ledger

These models define the strict schemas for every record the ledger holds.
They are designed to:
1. Enforce type safety at runtime
2. Provide clear validation error messages
3. Be serializable for storage and export

DESIGN DECISION: Entries are frozen. The ledger never edits an entry in
place; it only appends new ones and removes old ones.
"""

import math
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
)


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class EntryKind(str, Enum):
    """Whether an entry adds to or subtracts from the balance."""
    INCOME = "income"
    EXPENSE = "expense"


class ExportFormat(str, Enum):
    """Interchange formats the ledger can export to."""
    JSON = "json"
    CSV = "csv"


# =============================================================================
# LEDGER ENTRY
# =============================================================================

class EntryDraft(BaseModel):
    """
    A validated but not yet recorded entry.

    Produced by the validator; the ledger turns it into an Entry by
    assigning an id.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    description: str = Field(
        ...,
        min_length=1,
        description="What the money was for"
    )
    amount: Decimal = Field(
        ...,
        gt=0,
        description="Positive amount"
    )
    kind: EntryKind


class Entry(BaseModel):
    """
    One recorded income or expense item.

    This is the stored shape: types only, no value rules. Input rules live
    on EntryDraft, so whatever storage holds is adopted exactly as written.

    Older stored data names the discriminator ``type``; it is accepted on
    input and always written back as ``kind``.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
    )

    id: int = Field(
        ...,
        description="Unique, creation-time based identifier"
    )
    description: str = Field(
        ...,
        description="What the money was for"
    )
    amount: Decimal = Field(
        ...,
        description="Amount as recorded"
    )
    kind: EntryKind = Field(
        ...,
        validation_alias=AliasChoices("kind", "type"),
    )

    @classmethod
    def from_draft(cls, entry_id: int, draft: EntryDraft) -> "Entry":
        return cls(
            id=entry_id,
            description=draft.description,
            amount=draft.amount,
            kind=draft.kind,
        )

    @property
    def is_income(self) -> bool:
        return self.kind == EntryKind.INCOME


class LedgerTotals(BaseModel):
    """Aggregates derived from the full entry list."""
    model_config = ConfigDict(frozen=True)

    income_total: Decimal = Decimal(0)
    expense_total: Decimal = Decimal(0)
    balance: Decimal = Decimal(0)


# =============================================================================
# VALIDATION MODELS
# =============================================================================

class ValidationIssue(BaseModel):
    """A single problem found in add-input."""

    field: str = Field(
        ...,
        description="Field with the issue"
    )
    issue_type: str = Field(
        ...,
        pattern="^(missing|invalid_format|invalid_value)$",
        description="Type of issue"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )


class ValidationResult(BaseModel):
    """
    Outcome of validating add-input.

    ``draft`` is only populated when every field passed.
    """

    issues: list[ValidationIssue] = Field(default_factory=list)
    draft: Optional[EntryDraft] = None

    @property
    def is_valid(self) -> bool:
        return self.draft is not None and not self.issues

    @property
    def has_errors(self) -> bool:
        return bool(self.issues)

    @property
    def error_count(self) -> int:
        return len(self.issues)


def amount_to_number(value: Union[Decimal, float, int]) -> Union[int, float]:
    """
    JSON number for an amount.

    Integral values become ints (``50`` not ``50.0``); everything else
    becomes the nearest float, whose repr is the shortest round-tripping form.
    """
    if isinstance(value, Decimal):
        integral = value.is_finite() and value == value.to_integral_value()
    else:
        integral = math.isfinite(value) and float(value).is_integer()
    if integral and abs(value) < 10 ** 21:
        return int(value)
    return float(value)


def format_amount(value: Union[Decimal, float, int]) -> str:
    """Render an amount the way it appears in exports."""
    return str(amount_to_number(value))
