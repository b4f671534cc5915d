from canteen.models.order import Order, OrderItem, OrderItemAddition
from canteen.schemas.order import (
    OrderItemAdditionResponse,
    OrderItemResponse,
    OrderResponse,
    OrderStateResponse,
)


def order_item_addition_to_response(addition: OrderItemAddition) -> OrderItemAdditionResponse:
    food_addition = addition.food_addition
    return OrderItemAdditionResponse(
        id=addition.id,
        food_addition_id=addition.food_addition_id,
        name=food_addition.name if food_addition is not None else None,
        quantity=addition.quantity,
        price=addition.price,
    )


def order_item_to_response(item: OrderItem) -> OrderItemResponse:
    return OrderItemResponse(
        id=item.id,
        food_id=item.food_id,
        name=item.food.name if item.food is not None else None,
        quantity=item.quantity,
        price=item.price,
        additions=[order_item_addition_to_response(a) for a in item.additions],
    )


def order_to_response(order: Order) -> OrderResponse:
    current = order.current_state
    return OrderResponse(
        id=order.id,
        total_price=order.total_price,
        comment=order.comment or "",
        created_date=order.created_date,
        current_state=OrderStateResponse.model_validate(current) if current is not None else None,
        history=[OrderStateResponse.model_validate(state) for state in order.history],
        items=[order_item_to_response(item) for item in order.items],
    )
