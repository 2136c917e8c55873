"""Domain services."""

from .attendance_service import AttendanceEligibilityService, EligibilityVerdict
from .base import Service
from .invitation_service import (
    AcceptedInvitation,
    InvitationPage,
    InvitationResolution,
    InvitationService,
)

__all__ = [
    "AcceptedInvitation",
    "AttendanceEligibilityService",
    "EligibilityVerdict",
    "InvitationPage",
    "InvitationResolution",
    "InvitationService",
    "Service",
]
