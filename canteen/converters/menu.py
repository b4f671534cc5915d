from canteen.models.menu import Food, FoodAddition, Menu
from canteen.schemas.menu import FoodAdditionResponse, FoodResponse, MenuResponse


def addition_to_response(addition: FoodAddition) -> FoodAdditionResponse:
    return FoodAdditionResponse.model_validate(addition)


def food_to_response(food: Food) -> FoodResponse:
    return FoodResponse(
        id=food.id,
        name=food.name,
        price=food.price,
        description=food.description or "",
        additions=[addition_to_response(a) for a in food.additions],
    )


def menu_to_response(menu: Menu) -> MenuResponse:
    return MenuResponse(
        id=menu.id,
        name=menu.name,
        foods=[food_to_response(food) for food in menu.foods],
    )
