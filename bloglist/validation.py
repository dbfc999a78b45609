"""
Bloglist Backend — Resource Validation
=======================================

What:  One explicit validation function per resource payload.
How:   Each function inspects a plain mapping and returns a ValidationOutcome:
       either ok, or the list of constraints the payload violates, in the
       order they were checked.
Who:   Called by BlogService and UserService before touching the store.

These checks are independent of Pydantic: request schemas only parse field
types, the business constraints live here.

User checks run in a fixed order and stop at the first failure:
    1. password present, free of NUL bytes, within the length limits
    2. username long enough
    (3. username unique: needs the store, checked by UserService)
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from bloglist.exceptions import ValidationError

REQUIRED_BLOG_FIELDS = ("title", "author")


@dataclass(frozen=True)
class Violation:
    field: str
    message: str

    def as_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass
class ValidationOutcome:
    violations: List[Violation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations

    def add(self, field_name: str, message: str) -> None:
        self.violations.append(Violation(field_name, message))

    def raise_for_violations(self) -> None:
        """Raises ValidationError carrying every violation, if there are any."""
        if self.ok:
            return
        first = self.violations[0]
        raise ValidationError(
            message="; ".join(v.message for v in self.violations),
            field=first.field,
            violations=[v.as_dict() for v in self.violations],
        )


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_blog(payload: Mapping[str, Any]) -> ValidationOutcome:
    """Constraints for a blog creation payload: title and author must be non-empty."""
    outcome = ValidationOutcome()
    for name in REQUIRED_BLOG_FIELDS:
        if _is_blank(payload.get(name)):
            outcome.add(name, f"{name} is required")
    return outcome


def validate_blog_update(changes: Mapping[str, Any]) -> ValidationOutcome:
    """
    Constraints for a blog replacement payload.

    Fields are optional, but a supplied title or author may not blank the
    stored value.
    """
    outcome = ValidationOutcome()
    for name in REQUIRED_BLOG_FIELDS:
        if name in changes and _is_blank(changes[name]):
            outcome.add(name, f"{name} may not be empty")
    return outcome


def validate_user(
    payload: Mapping[str, Any],
    min_username_length: int,
    min_password_length: int,
    max_password_length: int = 72,
) -> ValidationOutcome:
    """
    Constraints for a user creation payload.

    The password limits count characters at the low end and UTF-8 bytes at
    the high end, where bcrypt truncates. bcrypt also refuses NUL bytes.
    """
    outcome = ValidationOutcome()

    password: Optional[str] = payload.get("password")
    if password is None:
        outcome.add("password", "password is required")
        return outcome
    if "\x00" in password:
        outcome.add("password", "password may not contain NUL characters")
        return outcome
    if len(password) < min_password_length:
        outcome.add(
            "password",
            f"password must be at least {min_password_length} characters long",
        )
        return outcome
    if len(password.encode("utf-8")) > max_password_length:
        outcome.add(
            "password",
            f"password must be at most {max_password_length} bytes long",
        )
        return outcome

    username = payload.get("username") or ""
    if len(username) < min_username_length:
        outcome.add(
            "username",
            f"username must be at least {min_username_length} characters long",
        )
    return outcome
