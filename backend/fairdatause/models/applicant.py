from __future__ import annotations

from sqlalchemy import Boolean, Column, DateTime, Index, Integer, String, false

from fairdatause.database import Base
from fairdatause.models._timestamps import utc_now, utcnow


class Applicant(Base):
    __tablename__ = "users"
    # (email, phone) uniqueness is checked before insert, not enforced here.
    __table_args__ = (
        Index("idx_users_email_phone", "email", "phone"),
        Index("idx_users_email", "email"),
    )

    id = Column(Integer, primary_key=True)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    reddit_username = Column(String(100), nullable=False)
    twitter_username = Column(String(100))
    youtube_username = Column(String(100))
    facebook_username = Column(String(100))
    reddit_verified = Column(Boolean, default=False, server_default=false(), nullable=False)
    created_at = Column(DateTime, default=utcnow, server_default=utc_now(), nullable=False)
    updated_at = Column(DateTime, default=utcnow, server_default=utc_now(), onupdate=utcnow, nullable=False)
