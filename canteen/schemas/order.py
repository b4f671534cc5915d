"""
Order Pydantic schemas.
"""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class OrderStateResponse(BaseModel):
    state: str
    entered_by_id: Optional[UUID] = None
    entered_date: datetime

    model_config = ConfigDict(from_attributes=True)


class OrderItemAdditionResponse(BaseModel):
    id: UUID
    food_addition_id: Optional[UUID] = None
    name: Optional[str] = None
    quantity: int
    price: Decimal


class OrderItemResponse(BaseModel):
    id: UUID
    food_id: Optional[UUID] = None
    name: Optional[str] = None
    quantity: int
    price: Decimal
    additions: List[OrderItemAdditionResponse]


class OrderResponse(BaseModel):
    id: UUID
    total_price: Decimal
    comment: str
    created_date: datetime
    current_state: Optional[OrderStateResponse] = None
    history: List[OrderStateResponse]
    items: List[OrderItemResponse]


class OrderListResponse(BaseModel):
    orders: List[OrderResponse]
    total: int
