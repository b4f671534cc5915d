"""
Catalog models: menus, foods and food additions.
"""
import uuid
from sqlalchemy import Column, String, Text, Numeric, DateTime, ForeignKey, Table, Uuid, func
from sqlalchemy.orm import relationship

from canteen.db.base import Base


menu_foods = Table(
    "menu_foods",
    Base.metadata,
    Column("menu_id", Uuid, ForeignKey("menus.id", ondelete="CASCADE"), primary_key=True),
    Column("food_id", Uuid, ForeignKey("foods.id", ondelete="CASCADE"), primary_key=True),
)

food_additions = Table(
    "food_food_additions",
    Base.metadata,
    Column("food_id", Uuid, ForeignKey("foods.id", ondelete="CASCADE"), primary_key=True),
    Column("food_addition_id", Uuid, ForeignKey("food_additions.id", ondelete="CASCADE"), primary_key=True),
)


class Menu(Base):
    """Named list of foods offered by the canteen."""
    __tablename__ = "menus"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    foods = relationship("Food", secondary=menu_foods, back_populates="menus")


class Food(Base):
    """A dish that can be ordered, with optional paid additions."""
    __tablename__ = "foods"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    description = Column(Text, nullable=False, default="")
    created_at = Column(DateTime, server_default=func.now())

    menus = relationship("Menu", secondary=menu_foods, back_populates="foods")
    additions = relationship("FoodAddition", secondary=food_additions)


class FoodAddition(Base):
    """Extra (sauce, side, topping) that can be added to a food."""
    __tablename__ = "food_additions"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
