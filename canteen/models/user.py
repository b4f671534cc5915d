import uuid
from sqlalchemy import Column, String, Boolean, DateTime, Uuid, func
from sqlalchemy.orm import relationship

from canteen.db.base import Base


class User(Base):
    """Identity and credentials of a person using the canteen."""
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(String(255), nullable=False, unique=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    hashed_password = Column(String(255), nullable=False)
    admin = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, server_default=func.now())

    worker = relationship("Worker", back_populates="person", uselist=False)
    orders = relationship("Order", back_populates="user")
