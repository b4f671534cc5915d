from typing import List

from sqlalchemy.orm import Session

from canteen.core.exceptions import FoodNotFoundError
from canteen.models.menu import Food, FoodAddition
from canteen.repositories.base import to_uuid, to_uuids
from canteen.schemas.menu import FoodCreateRequest


class FoodRepository:
    """
    Foods and their additions.

    save_food only flushes: the caller attaches the food to a menu and
    commits both in one transaction.
    """

    def __init__(self, db: Session):
        self.db = db

    def save_food(self, request: FoodCreateRequest) -> Food:
        additions = [
            FoodAddition(name=addition.name, price=addition.price)
            for addition in request.additions or []
        ]
        food = Food(
            name=request.name,
            price=request.price,
            description=request.description or "",
            additions=additions,
        )
        self.db.add(food)
        self.db.flush()
        return food

    def get_food_details(self, food_id) -> Food:
        food = self.db.get(Food, to_uuid(food_id))
        if food is None:
            raise FoodNotFoundError(food_id)
        return food

    def delete(self, ids: List[str]) -> int:
        """Hard-delete foods; unknown ids are ignored. Returns the number deleted."""
        uuids = to_uuids(ids)
        foods = self.db.query(Food).filter(Food.id.in_(uuids)).all()
        for food in foods:
            self.db.delete(food)
        self.db.commit()
        return len(foods)
