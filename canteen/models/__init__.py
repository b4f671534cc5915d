"""
SQLAlchemy models for the canteen.
"""
# People
from canteen.models.user import User
from canteen.models.worker import Worker, WorkHours
from canteen.models.day_off import DayOff, DayOffState

# Catalog
from canteen.models.menu import Menu, Food, FoodAddition, menu_foods, food_additions

# Orders
from canteen.models.order import Order, OrderItem, OrderItemAddition, OrderState

# Token Blacklist
from canteen.models.token_blacklist import TokenBlacklist


__all__ = [
    # People
    "User",
    "Worker",
    "WorkHours",
    "DayOff",
    "DayOffState",
    # Catalog
    "Menu",
    "Food",
    "FoodAddition",
    "menu_foods",
    "food_additions",
    # Orders
    "Order",
    "OrderItem",
    "OrderItemAddition",
    "OrderState",
    # Token Blacklist
    "TokenBlacklist",
]
