"""
Unit tests for request validators.
"""
from decimal import Decimal

import pytest

from canteen.schemas.menu import FoodAdditionCreateRequest, FoodCreateRequest, MenuCreateRequest
from canteen.schemas.worker import (
    DayOffChangeStateRequest,
    DayOffCreateRequest,
    HourMinute,
    WorkHoursCreateRequest,
    WorkerCreateRequest,
)
from canteen.services.work_hours import generate_default_work_hours
from canteen.validators.menu import (
    validate_food_addition_create,
    validate_food_create,
    validate_menu_create,
    validate_menu_name,
)
from canteen.validators.worker import (
    validate_day_off_change,
    validate_day_off_request,
    validate_permissions,
    validate_worker_create,
)


def worker_request(**overrides) -> WorkerCreateRequest:
    data = {
        "first_name": "Jan",
        "last_name": "Kowalski",
        "work_hours": generate_default_work_hours(),
    }
    data.update(overrides)
    return WorkerCreateRequest(**data)


class TestWorkerCreate:
    def test_valid(self):
        assert validate_worker_create(worker_request()) is True

    @pytest.mark.parametrize("field", ["first_name", "last_name"])
    def test_blank_names(self, field):
        assert validate_worker_create(worker_request(**{field: "   "})) is False
        assert validate_worker_create(worker_request(**{field: None})) is False

    def test_incomplete_week(self):
        assert validate_worker_create(worker_request(work_hours=generate_default_work_hours()[:6])) is False

    def test_duplicate_day(self):
        week = generate_default_work_hours()
        week[6] = WorkHoursCreateRequest(
            day_of_the_week=0,
            start=HourMinute(hour=8, minute=0),
            end=HourMinute(hour=16, minute=0),
        )

        assert validate_worker_create(worker_request(work_hours=week)) is False

    def test_invalid_clock_time(self):
        week = generate_default_work_hours()
        week[0] = WorkHoursCreateRequest(
            day_of_the_week=0,
            start=HourMinute(hour=8, minute=0),
            end=HourMinute(hour=24, minute=0),
        )

        assert validate_worker_create(worker_request(work_hours=week)) is False

    def test_start_after_end(self):
        week = generate_default_work_hours()
        week[2] = WorkHoursCreateRequest(
            day_of_the_week=2,
            start=HourMinute(hour=16, minute=30),
            end=HourMinute(hour=16, minute=0),
        )

        assert validate_worker_create(worker_request(work_hours=week)) is False


class TestDayOff:
    def test_valid_request(self):
        assert validate_day_off_request(DayOffCreateRequest(dates=["2024-05-06", "2024-05-07T00:00:00Z"])) is True

    def test_empty_request(self):
        assert validate_day_off_request(DayOffCreateRequest(dates=[])) is False

    @pytest.mark.parametrize("value", ["", "tomorrow", "2024-13-01"])
    def test_unparseable_date(self, value):
        assert validate_day_off_request(DayOffCreateRequest(dates=["2024-05-06", value])) is False

    @pytest.mark.parametrize("state", ["APPROVED", "REJECTED"])
    def test_resolving_states(self, state):
        assert validate_day_off_change(DayOffChangeStateRequest(id="abc", state=state)) is True

    @pytest.mark.parametrize("state", ["UNRESOLVED", "approved", ""])
    def test_other_states(self, state):
        assert validate_day_off_change(DayOffChangeStateRequest(id="abc", state=state)) is False

    def test_missing_id(self):
        assert validate_day_off_change(DayOffChangeStateRequest(id=" ", state="APPROVED")) is False


class TestPermissions:
    def test_known_permissions(self):
        assert validate_permissions(["P_MENU_CREATE", "P_MENU_FOOD_DELETE"]) is True
        assert validate_permissions([]) is True

    def test_unknown_permission(self):
        assert validate_permissions(["P_MENU_CREATE", "P_EVERYTHING"]) is False


class TestMenu:
    def test_menu_name(self):
        assert validate_menu_name("Lunch") is True
        assert validate_menu_name(" ab ") is False
        assert validate_menu_name(None) is False

    def test_menu_with_valid_foods(self):
        request = MenuCreateRequest(
            name="Lunch",
            foods=[FoodCreateRequest(name="Soup", price=Decimal("4.50"))],
        )

        assert validate_menu_create(request) is True

    def test_menu_with_invalid_food(self):
        request = MenuCreateRequest(
            name="Lunch",
            foods=[FoodCreateRequest(name="So", price=Decimal("4.50"))],
        )

        assert validate_menu_create(request) is False


class TestFood:
    def test_valid_food(self):
        food = FoodCreateRequest(
            name="Pancakes",
            price=Decimal("7.00"),
            additions=[FoodAdditionCreateRequest(name="Syrup", price=Decimal("0"))],
        )

        assert validate_food_create(food) == []

    def test_missing_fields(self):
        errors = validate_food_create(FoodCreateRequest())

        assert errors == ["Food name is required", "Food price is required"]

    def test_short_name_and_negative_price(self):
        errors = validate_food_create(FoodCreateRequest(name="Pi", price=Decimal("-1")))

        assert errors == [
            "Food name has to be at least 3 characters long",
            "Food price has to be at least 0",
        ]

    def test_addition_errors_reported_once(self):
        food = FoodCreateRequest(
            name="Pancakes",
            price=Decimal("7.00"),
            additions=[
                FoodAdditionCreateRequest(name="Ja", price=Decimal("1")),
                FoodAdditionCreateRequest(name="Nu", price=Decimal("-2")),
            ],
        )

        assert validate_food_create(food) == [
            "Food addition name has to be at least 3 characters long",
            "Food addition price has to be at least 0",
        ]

    def test_addition_missing_fields(self):
        assert validate_food_addition_create(FoodAdditionCreateRequest()) == [
            "Food addition name is required",
            "Food addition price is required",
        ]
