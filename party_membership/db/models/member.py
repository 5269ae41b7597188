from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, Index, func
from party_membership.db.base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Member(Base):
    __tablename__ = "party_members"

    id = Column(Integer, primary_key=True, index=True)

    member_number = Column(String(20), nullable=False, unique=True)

    full_name = Column(String(200), nullable=False)

    # unique case-insensitively via ix_party_members_email_lower
    email = Column(String(100), nullable=False)

    phone = Column(String(20), nullable=False)

    national_id = Column(String(20), nullable=False, unique=True)

    registered_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    # active | inactive
    status = Column(
        String(20),
        nullable=False,
        default="active",
        server_default="active",
    )

    __table_args__ = (
        Index(
            "ix_party_members_status_registered",
            "status",
            "registered_at",
        ),
    )


# case-insensitive email uniqueness
Index(
    "ix_party_members_email_lower",
    func.lower(Member.email),
    unique=True,
)

