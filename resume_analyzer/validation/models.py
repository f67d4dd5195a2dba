"""Validation result models."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ResumeValidation:
    """Outcome of checking pasted resume content."""

    has_email: bool = False
    has_phone: bool = False
    email_match: Optional[str] = None
    phone_match: Optional[str] = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "has_email": self.has_email,
            "has_phone": self.has_phone,
            "email_match": self.email_match,
            "phone_match": self.phone_match,
            "errors": list(self.errors),
        }


@dataclass
class JobValidation:
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {"is_valid": self.is_valid, "errors": list(self.errors)}


@dataclass
class ContactValidation:
    """Per-field errors for the contact form, at most one message per field."""

    field_errors: dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.field_errors

    def to_dict(self) -> dict:
        return {"is_valid": self.is_valid, "field_errors": dict(self.field_errors)}
