"""
Permission names that can be granted to workers.
"""
from enum import Enum


class Permission(str, Enum):
    MENU_CREATE = "P_MENU_CREATE"
    MENU_MODIFY = "P_MENU_MODIFY"
    MENU_DELETE = "P_MENU_DELETE"
    MENU_FOOD_CREATE = "P_MENU_FOOD_CREATE"
    MENU_FOOD_DELETE = "P_MENU_FOOD_DELETE"


ALL_PERMISSIONS = [permission.value for permission in Permission]
