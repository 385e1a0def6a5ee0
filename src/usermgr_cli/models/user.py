"""User data models and form validation.

``User`` mirrors a record of the remote collection. ``UserDraft`` is the
unvalidated form buffer, and ``UserForm`` is the schema a draft must satisfy
before it can be submitted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, field_validator

# One message per field, shown next to the offending input
FIELD_MESSAGES = {
    "name": "Name must be at least 2 characters long",
    "email": "Invalid email address",
    "password": "Password must be at least 6 characters long",
    "birthday": "Invalid date format",
}

DRAFT_FIELDS = ("name", "email", "password", "birthday", "img_url")


def parse_birthday(value: str) -> date:
    """Parse an ISO date (``1999-03-04``) or datetime into a calendar date.

    Raises:
        ValueError: If the text is not a valid date
    """
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        return datetime.fromisoformat(text).date()


class User(BaseModel):
    """User record as stored in the remote collection.

    Attributes:
        id: Numeric identifier, assigned by the client on creation
        name: Full name
        email: Email address
        password: Plain text password (stored and shown as-is)
        birthday: Date text
        img_url: Optional avatar image URL
    """

    # Keep whatever extra fields the server adds
    model_config = ConfigDict(extra="allow")

    id: int = Field(..., ge=1)
    name: str
    email: str
    password: str
    birthday: str
    img_url: str | None = None


class UserDraft(BaseModel):
    """Editable form values, not yet assigned an id."""

    name: str = ""
    email: str = ""
    password: str = ""
    birthday: str = ""
    img_url: str = ""

    @classmethod
    def empty(cls) -> UserDraft:
        return cls()

    @classmethod
    def from_user(cls, user: User) -> UserDraft:
        return cls(
            name=user.name,
            email=user.email,
            password=user.password,
            birthday=user.birthday,
            img_url=user.img_url or "",
        )


class UserForm(BaseModel):
    """Validated, normalized form values ready to be saved."""

    name: str = Field(..., min_length=2)
    email: EmailStr
    password: str = Field(..., min_length=6)
    birthday: str
    img_url: str | None = None

    @field_validator("email", mode="before")
    @classmethod
    def reject_display_name(cls, v):
        # EmailStr would accept "Name <addr>" and keep only the address
        if isinstance(v, str) and ("<" in v or ">" in v):
            raise ValueError("value is not a bare email address")
        return v

    @field_validator("birthday")
    @classmethod
    def validate_birthday(cls, v: str) -> str:
        parse_birthday(v)
        return v

    @field_validator("img_url", mode="before")
    @classmethod
    def empty_avatar_to_none(cls, v):
        if v == "":
            return None
        return v


@dataclass
class ValidationResult:
    """Outcome of validating a draft.

    Either ``values`` holds the normalized form, or ``errors`` maps each
    violated field to its message.
    """

    values: UserForm | None = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return self.values is not None and not self.errors


def validate_draft(draft: UserDraft) -> ValidationResult:
    """Validate a draft, reporting every invalid field at once."""
    try:
        values = UserForm.model_validate(draft.model_dump())
    except ValidationError as exc:
        errors: dict[str, str] = {}
        for error in exc.errors():
            name = str(error["loc"][0]) if error["loc"] else "__root__"
            errors.setdefault(name, FIELD_MESSAGES.get(name, error["msg"]))
        return ValidationResult(errors=errors)
    return ValidationResult(values=values)
