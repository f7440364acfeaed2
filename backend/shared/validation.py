"""
Field validation helpers.

Collects every violated field before failing, so callers always see the
complete list instead of the first problem only.
"""

from typing import Optional

from email_validator import EmailNotValidError, validate_email

from .exceptions import ValidationError

DEFAULT_VALIDATION_MESSAGE = "Validation failed. Entered data is incorrect."


class FieldErrors:
    """Accumulates per-field validation messages."""

    def __init__(self) -> None:
        self._errors: list[dict[str, str]] = []

    def add(self, field: str, message: str) -> None:
        self._errors.append({"field": field, "message": message})

    def check_min_length(
        self,
        field: str,
        value: Optional[str],
        min_length: int,
        message: Optional[str] = None,
    ) -> None:
        """Record an error if the trimmed value is shorter than min_length."""
        if value is None or len(value.strip()) < min_length:
            self.add(
                field,
                message or f"{field.capitalize()} must be at least {min_length} characters.",
            )

    def check_not_empty(self, field: str, value: Optional[str]) -> None:
        if value is None or not value.strip():
            self.add(field, f"{field.capitalize()} must not be empty.")

    def check_email(self, field: str, value: Optional[str]) -> None:
        try:
            validate_email(value or "", check_deliverability=False)
        except EmailNotValidError:
            self.add(field, "Please enter a valid email.")

    @property
    def errors(self) -> list[dict[str, str]]:
        return list(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def raise_if_any(self, message: str = DEFAULT_VALIDATION_MESSAGE) -> None:
        """Raise a ValidationError listing every recorded field."""
        if self._errors:
            raise ValidationError(message, code="VALIDATION_FAILED", data=self.errors)


def normalize_email(email: str) -> str:
    """Trim and lowercase an email address for storage and lookup."""
    return email.strip().lower()
