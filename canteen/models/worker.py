"""
Worker and default weekly schedule models.
"""
import uuid
from sqlalchemy import Column, Integer, Date, Time, DateTime, ForeignKey, JSON, Uuid, UniqueConstraint, func
from sqlalchemy.orm import relationship

from canteen.db.base import Base


class Worker(Base):
    """Employee scheduling record attached to a user account."""
    __tablename__ = "workers"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    person_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    employment_date = Column(Date, nullable=False, server_default=func.current_date())
    permissions = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, server_default=func.now())

    person = relationship("User", back_populates="worker")
    default_work_hours = relationship(
        "WorkHours",
        back_populates="worker",
        cascade="all, delete-orphan",
        order_by="WorkHours.day",
    )
    days_off = relationship(
        "DayOff",
        back_populates="worker",
        cascade="all, delete-orphan",
        foreign_keys="DayOff.worker_id",
    )


class WorkHours(Base):
    """Default working hours of a worker on one day of the week."""
    __tablename__ = "work_hours"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    worker_id = Column(Uuid, ForeignKey("workers.id", ondelete="CASCADE"), nullable=False)
    day = Column(Integer, nullable=False)  # 0=Monday, 6=Sunday
    start_hour = Column(Time, nullable=False)
    end_hour = Column(Time, nullable=False)

    worker = relationship("Worker", back_populates="default_work_hours")

    __table_args__ = (
        UniqueConstraint("worker_id", "day", name="uq_work_hours_worker_day"),
    )
