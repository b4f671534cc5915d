"""
Menu, food and food addition Pydantic schemas for API request/response models.
"""
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class FoodAdditionCreateRequest(BaseModel):
    name: Optional[str] = None
    price: Optional[Decimal] = None


class FoodCreateRequest(BaseModel):
    """
    Request model for a new food.

    Fields are optional so that missing values are reported by the food
    validator together with every other problem in the payload.
    A request carrying `id` asks for an update of an existing food.
    """
    id: Optional[str] = None
    name: Optional[str] = None
    price: Optional[Decimal] = None
    description: Optional[str] = None
    additions: Optional[List[FoodAdditionCreateRequest]] = None


class MenuCreateRequest(BaseModel):
    name: Optional[str] = None
    foods: List[FoodCreateRequest] = []


class MenuCreateResponse(BaseModel):
    id: UUID


class MenuChangeNameRequest(BaseModel):
    name: Optional[str] = None


class IdsRequest(BaseModel):
    """Request model for bulk operations on identifiers."""
    ids: List[str] = []


class FoodAdditionResponse(BaseModel):
    id: UUID
    name: str
    price: Decimal

    model_config = ConfigDict(from_attributes=True)


class FoodResponse(BaseModel):
    id: UUID
    name: str
    price: Decimal
    description: str
    additions: List[FoodAdditionResponse]


class MenuResponse(BaseModel):
    id: UUID
    name: str
    foods: List[FoodResponse]
