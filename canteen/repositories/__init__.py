"""
Repositories wrapping database queries for each aggregate root.
"""
from canteen.repositories.base import to_uuid
from canteen.repositories.user import SaveUserCommand, UserRepository
from canteen.repositories.worker import SaveWorkerCommand, WorkerRepository
from canteen.repositories.day_off import DayOffFilter, DayOffRepository, SaveDayOffCommand
from canteen.repositories.food import FoodRepository
from canteen.repositories.menu import MenuRepository
from canteen.repositories.order import OrderRepository

__all__ = [
    "to_uuid",
    "SaveUserCommand",
    "UserRepository",
    "SaveWorkerCommand",
    "WorkerRepository",
    "DayOffFilter",
    "DayOffRepository",
    "SaveDayOffCommand",
    "FoodRepository",
    "MenuRepository",
    "OrderRepository",
]
