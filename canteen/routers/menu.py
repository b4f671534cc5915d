"""
Menu router: listing, creating, renaming and deleting menus, and adding
foods to a menu.

Reading menus is public; changes need an administrator holding the
matching permission.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from canteen.converters.menu import menu_to_response
from canteen.core.deps import require_permission
from canteen.core.exceptions import InvalidIdentifierError, MenuNotFoundError
from canteen.core.permissions import Permission
from canteen.db.session import get_db
from canteen.models.user import User
from canteen.repositories.food import FoodRepository
from canteen.repositories.menu import MenuRepository
from canteen.schemas.menu import (
    FoodCreateRequest,
    IdsRequest,
    MenuChangeNameRequest,
    MenuCreateRequest,
    MenuCreateResponse,
    MenuResponse,
)
from canteen.validators.menu import validate_food_create, validate_menu_create, validate_menu_name

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/menu", tags=["menu"])


@router.get("", response_model=List[MenuResponse])
def list_menus(db: Session = Depends(get_db)):
    """Every menu with its foods and their additions."""
    return [menu_to_response(menu) for menu in MenuRepository(db).get_all_menus()]


@router.get("/{menu_id}", response_model=MenuResponse)
def get_menu_details(menu_id: str, db: Session = Depends(get_db)):
    try:
        menu = MenuRepository(db).get_menu_by_id(menu_id)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except MenuNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return menu_to_response(menu)


@router.post("", response_model=MenuCreateResponse, status_code=status.HTTP_201_CREATED)
def create_menu(
    request: MenuCreateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission(Permission.MENU_CREATE)),
):
    """Create a menu together with its new foods."""
    if not validate_menu_create(request):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid menu")

    foods_repository = FoodRepository(db)
    foods = [foods_repository.save_food(food) for food in request.foods]
    menu = MenuRepository(db).save_menu(request.name.strip(), foods)

    return MenuCreateResponse(id=menu.id)


@router.post("/{menu_id}/food", status_code=status.HTTP_201_CREATED)
def create_food(
    menu_id: str,
    request: FoodCreateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission(Permission.MENU_FOOD_CREATE)),
):
    """
    Add a new food to a menu.

    A payload carrying `id` refers to an existing food; updating foods is
    not supported and answers 501.
    """
    repository = MenuRepository(db)
    try:
        menu = repository.get_menu_by_id(menu_id)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except MenuNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Menu not found")

    if request.id:
        return JSONResponse(
            status_code=status.HTTP_501_NOT_IMPLEMENTED,
            content={"detail": "Updating foods is not implemented"},
        )

    errors = validate_food_create(request)
    if errors:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=errors)

    food = FoodRepository(db).save_food(request)
    repository.add_food(menu, food)

    return {"id": str(food.id)}


@router.delete("")
def delete_menus(
    request: IdsRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission(Permission.MENU_DELETE)),
):
    """Hard-delete menus. Their foods are kept."""
    if not request.ids:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No menu ids given")

    try:
        deleted = MenuRepository(db).delete(request.ids)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    logger.info(f"Deleted {deleted} menu(s) by {current_user.email}")
    return {"deleted": deleted}


@router.patch("/{menu_id}")
def change_name(
    menu_id: str,
    request: MenuChangeNameRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission(Permission.MENU_MODIFY)),
):
    if not validate_menu_name(request.name):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid menu name")

    try:
        MenuRepository(db).change_name(menu_id, request.name.strip())
    except MenuNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return {"id": menu_id, "name": request.name.strip()}
