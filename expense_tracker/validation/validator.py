"""
Submission-time Draft Validation

DESIGN DECISION: The form accepts anything while the user types.
All checks happen here, once, when the draft is submitted.

Rules:
- category must be non-empty (text is taken as typed)
- amount must be non-zero

IMPORTANT: Validation NEVER silently fixes the draft.
It reports issues and the caller aborts the add.
"""

from expense_tracker.models.expense import (
    ExpenseDraft,
    ValidationIssue,
    ValidationResult,
)


REQUIRED_FIELDS_MESSAGE = "Category and Amount are required."


class DraftValidator:
    """Checks a draft before it is turned into an Expense."""

    def validate(self, draft: ExpenseDraft) -> ValidationResult:
        issues = []

        if not draft.category:
            issues.append(ValidationIssue(
                field="category",
                issue_type="missing",
                message="Category is required",
            ))

        if not draft.amount:
            issues.append(ValidationIssue(
                field="amount",
                issue_type="missing",
                message="Amount must be a non-zero number",
            ))

        return ValidationResult(issues=issues)

    def summary(self, result: ValidationResult) -> str:
        """One message for the user, whichever required field is missing."""
        if result.is_valid:
            return ""
        return REQUIRED_FIELDS_MESSAGE
