"""Domain value objects for the attendance tracker.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
import secrets
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from attend.domain.value.common import RootValueObject, ValueObject

TOKEN_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")

# Telegram user IDs are stored in a 64-character column
TELEGRAM_ID_MAX_LENGTH = 64


class InvitationStatus(str, Enum):
    """Status of an invitation.

    PENDING is the only non-terminal state.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    EXPIRED = "expired"
    CANCELLED = "cancelled"


class ResolutionOutcome(str, Enum):
    """What a token resolution found.

    EXPIRED_NOW means this very resolution moved the invitation to EXPIRED;
    EXPIRED means it had already been marked expired before.
    """

    VALID = "valid"
    EXPIRED_NOW = "expired_now"
    EXPIRED = "expired"
    ACCEPTED = "accepted"
    CANCELLED = "cancelled"


class InvitationToken(RootValueObject[str]):
    """Unguessable invitation token.

    Embedded into the bot deep link, so it is limited to the characters
    Telegram accepts in a start parameter.
    """

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is URL-safe and 1-64 characters."""
        if not TOKEN_PATTERN.match(v):
            raise ValueError(
                "Token must be 1-64 characters of letters, digits, '-' or '_'"
            )
        return v

    @classmethod
    def generate(cls) -> "InvitationToken":
        """Generate a fresh 128-bit token (32 hex characters)."""
        return cls(secrets.token_hex(16))

    def masked(self) -> str:
        """Shortened form for logs."""
        return self.root[:8] + "..."


class InviteePayload(ValueObject):
    """Employee details captured when an invitation is created.

    Copied verbatim into the employee record on acceptance.
    """

    first_name: str = Field(min_length=1, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    department: Optional[str] = Field(default=None, max_length=100)
    position: Optional[str] = Field(default=None, max_length=100)
    email: Optional[str] = Field(default=None, max_length=255)
    phone_number: Optional[str] = Field(default=None, max_length=32)

    @field_validator("first_name")
    @classmethod
    def validate_first_name(cls, v: str) -> str:
        """Reject whitespace-only names."""
        if not v.strip():
            raise ValueError("First name must not be blank")
        return v.strip()


class AcceptanceOverrides(ValueObject):
    """Self-reported contact fields supplied by the invitee on acceptance.

    Identity fields (name, department, position) stay administrator-controlled.
    """

    username: Optional[str] = Field(default=None, max_length=100)
    phone_number: Optional[str] = Field(default=None, max_length=32)


class Coordinates(ValueObject):
    """A reported or configured geographic position in decimal degrees.

    Range checks live in the geo validator so that invalid reports can be
    answered with a typed failure instead of failing at construction.
    """

    latitude: float
    longitude: float


class OfficeReference(ValueObject):
    """The geofence centre and its admissible radius."""

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    radius_meters: float = Field(gt=0)

    @property
    def coordinates(self) -> Coordinates:
        """Office position as plain coordinates."""
        return Coordinates(latitude=self.latitude, longitude=self.longitude)
