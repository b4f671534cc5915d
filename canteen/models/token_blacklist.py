"""
Token blacklist model for refresh token rotation.

A refresh token is blacklisted once it has been exchanged, so each refresh
token can be used only once.
"""
from sqlalchemy import Column, String, DateTime, Index
from sqlalchemy.sql import func

from canteen.db.base import Base


class TokenBlacklist(Base):
    """Hashes of revoked JWT tokens."""
    __tablename__ = "token_blacklist"

    token_hash = Column(String(64), primary_key=True)
    blacklisted_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    # kept until expiry so expired rows can be purged
    expires_at = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        Index('idx_token_blacklist_expires', 'expires_at'),
    )
