from typing import List, Optional

from canteen.schemas.menu import FoodAdditionCreateRequest, FoodCreateRequest, MenuCreateRequest

MIN_NAME_LENGTH = 3


def validate_menu_name(name: Optional[str]) -> bool:
    return name is not None and len(name.strip()) >= MIN_NAME_LENGTH


def validate_menu_create(request: MenuCreateRequest) -> bool:
    if not validate_menu_name(request.name):
        return False
    return all(not validate_food_create(food) for food in request.foods)


def validate_food_addition_create(addition: FoodAdditionCreateRequest) -> List[str]:
    errors = []

    if not addition.name:
        errors.append("Food addition name is required")
    elif len(addition.name) < MIN_NAME_LENGTH:
        errors.append(f"Food addition name has to be at least {MIN_NAME_LENGTH} characters long")

    if addition.price is None:
        errors.append("Food addition price is required")
    elif addition.price < 0:
        errors.append("Food addition price has to be at least 0")

    return errors


def validate_food_create(food: FoodCreateRequest) -> List[str]:
    """Return every problem with a new food; an empty list means valid."""
    errors = []

    if not food.name:
        errors.append("Food name is required")
    elif len(food.name) < MIN_NAME_LENGTH:
        errors.append(f"Food name has to be at least {MIN_NAME_LENGTH} characters long")

    if food.price is None:
        errors.append("Food price is required")
    elif food.price < 0:
        errors.append("Food price has to be at least 0")

    # each distinct addition error once, in first-seen order
    for addition in food.additions or []:
        for error in validate_food_addition_create(addition):
            if error not in errors:
                errors.append(error)

    return errors
