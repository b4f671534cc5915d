"""
Day-off requests and their approval state.
"""
import uuid
from enum import Enum
from sqlalchemy import Column, String, Date, DateTime, ForeignKey, Index, Uuid, func
from sqlalchemy.orm import relationship

from canteen.db.base import Base


class DayOffState(str, Enum):
    UNRESOLVED = "UNRESOLVED"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class DayOff(Base):
    """A worker's requested absence on one calendar day."""
    __tablename__ = "days_off"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    worker_id = Column(Uuid, ForeignKey("workers.id", ondelete="CASCADE"), nullable=False)
    date = Column(Date, nullable=False)
    state = Column(String(20), nullable=False, default=DayOffState.UNRESOLVED.value)
    resolved_by_id = Column(Uuid, ForeignKey("workers.id", ondelete="SET NULL"))
    resolved_date = Column(DateTime(timezone=True))
    created_at = Column(DateTime, server_default=func.now())

    worker = relationship("Worker", back_populates="days_off", foreign_keys=[worker_id])
    resolved_by = relationship("Worker", foreign_keys=[resolved_by_id])

    __table_args__ = (
        Index("idx_days_off_date_state", "date", "state"),
        Index("idx_days_off_worker", "worker_id"),
    )
