"""
Food router: food details and bulk deletion.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from canteen.converters.menu import food_to_response
from canteen.core.deps import require_permission
from canteen.core.exceptions import FoodNotFoundError, InvalidIdentifierError
from canteen.core.permissions import Permission
from canteen.db.session import get_db
from canteen.models.user import User
from canteen.repositories.food import FoodRepository
from canteen.repositories.menu import MenuRepository
from canteen.schemas.menu import FoodResponse, IdsRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/food", tags=["food"])


@router.get("/{food_id}", response_model=FoodResponse)
def get_food_details(food_id: str, db: Session = Depends(get_db)):
    try:
        food = FoodRepository(db).get_food_details(food_id)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except FoodNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return food_to_response(food)


@router.delete("")
def delete_foods(
    request: IdsRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission(Permission.MENU_FOOD_DELETE)),
):
    """Remove foods from every menu, then delete them."""
    if not request.ids:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No food ids given")

    try:
        MenuRepository(db).remove_foods(request.ids)
        deleted = FoodRepository(db).delete(request.ids)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    logger.info(f"Deleted {deleted} food(s) by {current_user.email}")
    return {"deleted": deleted}
