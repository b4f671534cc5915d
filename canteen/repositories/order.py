from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from canteen.models.order import Order, OrderItem
from canteen.repositories.base import to_uuid


class OrderRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_orders_for_user(self, user_id) -> List[Order]:
        stmt = (
            select(Order)
            .where(Order.user_id == to_uuid(user_id))
            .options(
                selectinload(Order.items).selectinload(OrderItem.food),
                selectinload(Order.items).selectinload(OrderItem.additions),
                selectinload(Order.history),
            )
            .order_by(Order.created_date.desc())
        )
        return list(self.db.execute(stmt).scalars().all())
