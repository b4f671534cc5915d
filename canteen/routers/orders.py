"""
Orders router: the current user's order history.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from canteen.converters.order import order_to_response
from canteen.core.deps import get_current_user
from canteen.db.session import get_db
from canteen.models.user import User
from canteen.repositories.order import OrderRepository
from canteen.schemas.order import OrderListResponse

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=OrderListResponse)
def list_my_orders(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Orders placed by the current user, newest first."""
    orders = OrderRepository(db).find_orders_for_user(current_user.id)
    return OrderListResponse(orders=[order_to_response(order) for order in orders], total=len(orders))
