from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from canteen.core.exceptions import MenuNotFoundError
from canteen.models.menu import Food, Menu
from canteen.repositories.base import to_uuid, to_uuids


class MenuRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_all_menus(self) -> List[Menu]:
        stmt = (
            select(Menu)
            .options(selectinload(Menu.foods).selectinload(Food.additions))
            .order_by(Menu.created_at.asc(), Menu.name.asc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_menu_by_id(self, menu_id) -> Menu:
        menu = self.db.get(Menu, to_uuid(menu_id))
        if menu is None:
            raise MenuNotFoundError(menu_id)
        return menu

    def save_menu(self, name: str, foods: List[Food]) -> Menu:
        menu = Menu(name=name, foods=list(foods))
        self.db.add(menu)
        self.db.commit()
        self.db.refresh(menu)
        return menu

    def add_food(self, menu: Menu, food: Food) -> Menu:
        menu.foods.append(food)
        self.db.commit()
        return menu

    def change_name(self, menu_id, new_name: str) -> None:
        menu = self.get_menu_by_id(menu_id)
        menu.name = new_name
        self.db.commit()

    def delete(self, ids: List[str]) -> int:
        """Hard-delete menus; unknown ids are ignored. Returns the number deleted."""
        uuids = to_uuids(ids)
        menus = self.db.query(Menu).filter(Menu.id.in_(uuids)).all()
        for menu in menus:
            self.db.delete(menu)
        self.db.commit()
        return len(menus)

    def remove_foods(self, food_ids: List[str]) -> None:
        """Detach the given foods from every menu that lists them."""
        uuids = to_uuids(food_ids)
        for food in self.db.query(Food).filter(Food.id.in_(uuids)).all():
            food.menus.clear()
        self.db.commit()
