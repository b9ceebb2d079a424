"""
Entry Input Validation

Turns the raw values a user typed (description, amount, kind) into a
validated EntryDraft, or into a list of issues explaining what is wrong.

IMPORTANT: Validation NEVER silently fixes issues beyond trimming
surrounding whitespace. Everything else is reported back to the caller,
and every field is checked so the user sees all problems at once.
"""

import math
import numbers
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union

from src.models.entry import (
    EntryDraft,
    EntryKind,
    ValidationIssue,
    ValidationResult,
)


class EntryValidator:
    """Validates add-input for the ledger."""

    def _validate_description(
        self,
        description: Any,
    ) -> tuple[Optional[str], list[ValidationIssue]]:
        if not isinstance(description, str):
            return None, [ValidationIssue(
                field="description",
                issue_type="invalid_format",
                message="Description must be text",
            )]

        try:
            description.encode("utf-8")
        except UnicodeEncodeError:
            return None, [ValidationIssue(
                field="description",
                issue_type="invalid_format",
                message="Description contains characters that cannot be stored",
            )]

        trimmed = description.strip()
        if not trimmed:
            return None, [ValidationIssue(
                field="description",
                issue_type="missing",
                message="Description is required",
            )]

        return trimmed, []

    def _to_decimal(self, amount: Union[numbers.Real, Decimal, str]) -> Decimal:
        """Exact Decimal for typed text and ints; shortest float form otherwise."""
        if isinstance(amount, Decimal):
            return amount
        if isinstance(amount, str):
            return Decimal(amount.strip())
        if isinstance(amount, numbers.Integral):
            return Decimal(int(amount))
        return Decimal(repr(float(amount)))

    def _validate_amount(
        self,
        amount: Any,
    ) -> tuple[Optional[Decimal], list[ValidationIssue]]:
        # bool is an int subclass; True is not an amount
        if isinstance(amount, bool) or not isinstance(amount, (numbers.Real, Decimal, str)):
            return None, [ValidationIssue(
                field="amount",
                issue_type="invalid_format",
                message="Amount must be a number",
            )]

        if isinstance(amount, str) and not amount.strip():
            return None, [ValidationIssue(
                field="amount",
                issue_type="missing",
                message="Amount is required",
            )]

        try:
            value = self._to_decimal(amount)
        except (InvalidOperation, ValueError, OverflowError):
            return None, [ValidationIssue(
                field="amount",
                issue_type="invalid_format",
                message=f"Amount is not a number: {amount!r}",
            )]

        # Amounts are exported as JSON numbers, so they must also fit a float
        if not value.is_finite() or not math.isfinite(float(value)):
            return None, [ValidationIssue(
                field="amount",
                issue_type="invalid_value",
                message="Amount must be a finite number",
            )]

        if value <= 0:
            return None, [ValidationIssue(
                field="amount",
                issue_type="invalid_value",
                message="Amount must be greater than zero",
            )]

        return value, []

    def _validate_kind(
        self,
        kind: Union[EntryKind, str, Any],
    ) -> tuple[Optional[EntryKind], list[ValidationIssue]]:
        try:
            return EntryKind(kind), []
        except ValueError:
            allowed = ", ".join(k.value for k in EntryKind)
            return None, [ValidationIssue(
                field="kind",
                issue_type="invalid_value",
                message=f"Kind must be one of: {allowed} (got {kind!r})",
            )]

    def validate(
        self,
        description: Any,
        amount: Any,
        kind: Any,
    ) -> ValidationResult:
        """
        Validate one add request.

        Args:
            description: Free text; surrounding whitespace is trimmed
            amount: int, float, Decimal, Fraction or numeric string; must be
                positive and finite
            kind: EntryKind or its string value

        Returns:
            ValidationResult with a draft when valid, issues otherwise
        """
        clean_description, description_issues = self._validate_description(description)
        clean_amount, amount_issues = self._validate_amount(amount)
        clean_kind, kind_issues = self._validate_kind(kind)

        issues = description_issues + amount_issues + kind_issues
        if issues:
            return ValidationResult(issues=issues)

        return ValidationResult(
            draft=EntryDraft(
                description=clean_description,
                amount=clean_amount,
                kind=clean_kind,
            ),
        )

    def get_user_friendly_summary(self, result: ValidationResult) -> str:
        """
        Generate a short summary of validation results for display.
        """
        if result.is_valid:
            return "Entry looks good."

        lines = ["Please fix the following:"]
        for issue in result.issues:
            lines.append(f"   • {issue.message}")
        return "\n".join(lines)
