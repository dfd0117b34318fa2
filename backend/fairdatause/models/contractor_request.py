from __future__ import annotations

import enum

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, ForeignKey, Index, Integer, String, false

from fairdatause.database import Base
from fairdatause.models._timestamps import utc_now, utcnow


class ContractorStatus(str, enum.Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class ContractorRequest(Base):
    __tablename__ = "contractors"
    __table_args__ = (
        CheckConstraint("status IN ('pending', 'accepted', 'rejected')", name="ck_contractors_status"),
        Index("idx_contractors_email", "email"),
        Index("idx_contractors_user_id", "user_id"),
        Index("idx_contractors_company_slug", "company_slug"),
    )

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    email = Column(String(255), nullable=False)
    company_slug = Column(String(100), nullable=False)
    company_name = Column(String(200), nullable=False)
    status = Column(String(20), default=ContractorStatus.PENDING.value, server_default="pending", nullable=False)
    joined_slack = Column(Boolean, default=False, server_default=false(), nullable=False)
    can_start_job = Column(Boolean, default=False, server_default=false(), nullable=False)
    created_at = Column(DateTime, default=utcnow, server_default=utc_now(), nullable=False)
    updated_at = Column(DateTime, default=utcnow, server_default=utc_now(), onupdate=utcnow, nullable=False)
