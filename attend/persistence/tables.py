"""SQLAlchemy table definitions for the attendance tracker.

Tables are plain Core ``Table`` objects; rows are mapped to the immutable
domain models by hand in ``mappers``.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# EMPLOYEES TABLE
# ============================================================================
employees_table = Table(
    "employees",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("telegram_id", String(64), nullable=False, unique=True),
    Column("first_name", String(100), nullable=False),
    Column("last_name", String(100), nullable=True),
    Column("username", String(100), nullable=True),  # Telegram @username
    Column("phone_number", String(32), nullable=True),
    Column("department", String(100), nullable=True),
    Column("position", String(100), nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "registered_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
)

# ============================================================================
# INVITATIONS TABLE
# ============================================================================
invitations_table = Table(
    "invitations",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("token", String(64), nullable=False, unique=True),  # Deep-link token
    Column("first_name", String(100), nullable=False),
    Column("last_name", String(100), nullable=True),
    Column("department", String(100), nullable=True),
    Column("position", String(100), nullable=True),
    Column("email", String(255), nullable=True),
    Column("phone_number", String(32), nullable=True),
    Column("invited_by", String(255), nullable=False),  # Admin identifier
    Column(
        "invited_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column(
        "employee_id",
        UUID(as_uuid=True),
        ForeignKey("employees.id", ondelete="RESTRICT"),
        nullable=True,
    ),
    Column("accepted_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint(
        "status IN ('pending', 'accepted', 'expired', 'cancelled')",
        name="ck_invitations_status",
    ),
    # Accepted exactly when linked to an employee
    CheckConstraint(
        "(status = 'accepted') = (employee_id IS NOT NULL AND accepted_at IS NOT NULL)",
        name="ck_invitations_acceptance_link",
    ),
)

Index("idx_invitations_status", invitations_table.c.status)
Index("idx_invitations_invited_by", invitations_table.c.invited_by)
Index("idx_invitations_invited_at", invitations_table.c.invited_at.desc())
