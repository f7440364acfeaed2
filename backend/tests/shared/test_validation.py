"""Tests for shared/validation.py."""

import pytest

from shared.exceptions import ValidationError
from shared.validation import DEFAULT_VALIDATION_MESSAGE, FieldErrors, normalize_email


class TestFieldErrors:
    def test_empty_does_not_raise(self):
        errors = FieldErrors()
        errors.check_min_length("title", "Long enough", 5)
        assert not errors
        errors.raise_if_any()

    def test_min_length_counts_trimmed_value(self):
        errors = FieldErrors()
        errors.check_min_length("title", "  abc   ", 5)
        assert errors.errors == [
            {"field": "title", "message": "Title must be at least 5 characters."}
        ]

    def test_min_length_rejects_none(self):
        errors = FieldErrors()
        errors.check_min_length("content", None, 5)
        assert errors.errors[0]["field"] == "content"

    def test_custom_message(self):
        errors = FieldErrors()
        errors.check_min_length("password", "abc", 5, "Password too short.")
        assert errors.errors[0]["message"] == "Password too short."

    def test_not_empty(self):
        errors = FieldErrors()
        errors.check_not_empty("name", "   ")
        assert errors.errors == [{"field": "name", "message": "Name must not be empty."}]

    @pytest.mark.parametrize("email", ["not-an-email", "", "a@", "@x.com"])
    def test_invalid_email(self, email):
        errors = FieldErrors()
        errors.check_email("email", email)
        assert errors.errors == [{"field": "email", "message": "Please enter a valid email."}]

    def test_valid_email(self):
        errors = FieldErrors()
        errors.check_email("email", "ann@example.com")
        assert not errors

    def test_raise_lists_every_field(self):
        errors = FieldErrors()
        errors.check_min_length("title", "abc", 5)
        errors.check_min_length("content", "", 5)

        with pytest.raises(ValidationError) as exc_info:
            errors.raise_if_any()

        assert exc_info.value.message == DEFAULT_VALIDATION_MESSAGE
        assert exc_info.value.code == "VALIDATION_FAILED"
        assert [e["field"] for e in exc_info.value.data] == ["title", "content"]


class TestNormalizeEmail:
    def test_trims_and_lowercases(self):
        assert normalize_email("  Ann@Example.COM ") == "ann@example.com"
