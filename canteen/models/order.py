"""
Order models: orders, their items, item additions and state history.
"""
import uuid
from sqlalchemy import Column, String, Text, Integer, Numeric, DateTime, ForeignKey, Uuid, func
from sqlalchemy.orm import relationship

from canteen.db.base import Base


class Order(Base):
    """A user's order placed in the canteen."""
    __tablename__ = "orders"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    total_price = Column(Numeric(10, 2), nullable=False)
    comment = Column(Text, nullable=False, default="")
    created_date = Column(DateTime, nullable=False, server_default=func.now())

    user = relationship("User", back_populates="orders")
    items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan")
    history = relationship(
        "OrderState",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderState.entered_date",
    )

    @property
    def current_state(self):
        """Most recently entered state, or None for an order without history."""
        return self.history[-1] if self.history else None


class OrderItem(Base):
    """One food in an order."""
    __tablename__ = "order_items"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    order_id = Column(Uuid, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    food_id = Column(Uuid, ForeignKey("foods.id", ondelete="SET NULL"))
    quantity = Column(Integer, nullable=False, default=1)
    price = Column(Numeric(10, 2), nullable=False)

    order = relationship("Order", back_populates="items")
    food = relationship("Food")
    additions = relationship("OrderItemAddition", back_populates="order_item", cascade="all, delete-orphan")


class OrderItemAddition(Base):
    """Food addition chosen for an order item."""
    __tablename__ = "order_item_additions"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    order_item_id = Column(Uuid, ForeignKey("order_items.id", ondelete="CASCADE"), nullable=False)
    food_addition_id = Column(Uuid, ForeignKey("food_additions.id", ondelete="SET NULL"))
    quantity = Column(Integer, nullable=False, default=1)
    price = Column(Numeric(10, 2), nullable=False)

    order_item = relationship("OrderItem", back_populates="additions")
    food_addition = relationship("FoodAddition")


class OrderState(Base):
    """Entry in an order's state history (SAVED, IN_PROGRESS, ...)."""
    __tablename__ = "order_states"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    order_id = Column(Uuid, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    state = Column(String(30), nullable=False)
    entered_by_id = Column(Uuid, ForeignKey("users.id", ondelete="SET NULL"))
    entered_date = Column(DateTime, nullable=False, server_default=func.now())

    order = relationship("Order", back_populates="history")
    entered_by = relationship("User")
