"""
Test configuration and fixtures.

Every test gets a fresh in-memory SQLite database seeded with a standard
user, an administrator, a menu with one food and one addition, and one
order.
"""
import os
from datetime import date, time
from decimal import Decimal
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

# Configure the app before importing it
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "canteen-test-secret-key-0123456789abcdef"

from canteen.main import app
from canteen.core.permissions import ALL_PERMISSIONS
from canteen.core.security import hash_password
from canteen.db.base import Base
from canteen.db.session import get_db
from canteen.models import (
    Food,
    FoodAddition,
    Menu,
    Order,
    OrderItem,
    OrderItemAddition,
    OrderState,
    User,
    Worker,
    WorkHours,
)

PASSWORD = "password"
PASSWORD_HASH = hash_password(PASSWORD)

STANDARD_USER = {
    "email": "test_user@canteen.com",
    "first_name": "Amanda",
    "last_name": "Fishsticks",
}

ADMIN_USER = {
    "email": "test_admin@canteen.com",
    "first_name": "Felix",
    "last_name": "Fitzgerald",
}

# Monday-Friday 08:00-16:00
OFFICE_WEEK = [
    (day, time(8, 0), time(16, 0)) if day < 5 else (day, time(0, 0), time(0, 0))
    for day in range(7)
]

# Saturday 10:00-14:00 only
WEEKEND_WEEK = [
    (day, time(10, 0), time(14, 0)) if day == 5 else (day, time(0, 0), time(0, 0))
    for day in range(7)
]

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def create_worker(db: Session, user_data: dict, week, admin: bool = False, permissions=None) -> Worker:
    """Persist a user and its worker record."""
    user = User(hashed_password=PASSWORD_HASH, admin=admin, **user_data)
    worker = Worker(
        person=user,
        employment_date=date(2020, 1, 1),
        permissions=list(permissions or []),
        default_work_hours=[WorkHours(day=d, start_hour=s, end_hour=e) for d, s, e in week],
    )
    db.add(worker)
    db.commit()
    db.refresh(worker)
    return worker


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Create a fresh schema and a session for the test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db: Session) -> Generator[TestClient, None, None]:
    """Create test client with database session override."""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def standard_worker(db: Session) -> Worker:
    """Non-admin user with a weekend schedule."""
    return create_worker(db, STANDARD_USER, WEEKEND_WEEK)


@pytest.fixture
def admin_worker(db: Session) -> Worker:
    """Administrator holding every permission, working office hours."""
    return create_worker(db, ADMIN_USER, OFFICE_WEEK, admin=True, permissions=ALL_PERMISSIONS)


@pytest.fixture
def limited_admin_worker(db: Session) -> Worker:
    """Administrator without any permission."""
    return create_worker(
        db,
        {"email": "limited_admin@canteen.com", "first_name": "Lena", "last_name": "Limited"},
        OFFICE_WEEK,
        admin=True,
    )


@pytest.fixture
def sample_menu(db: Session) -> Menu:
    """Breakfast menu with one food carrying one addition."""
    addition = FoodAddition(name="Mayo", price=Decimal("0.99"))
    food = Food(
        name="Omelette Sandwich",
        price=Decimal("15.99"),
        description="Just a fancy sandwich",
        additions=[addition],
    )
    menu = Menu(name="Breakfast Menu", foods=[food])
    db.add(menu)
    db.commit()
    db.refresh(menu)
    return menu


@pytest.fixture
def sample_order(db: Session, standard_worker: Worker, sample_menu: Menu) -> Order:
    """Saved order of the standard user for the menu's food with its addition."""
    food = sample_menu.foods[0]
    addition = food.additions[0]
    user = standard_worker.person

    order = Order(
        user=user,
        total_price=food.price + addition.price,
        comment="",
        items=[
            OrderItem(
                food=food,
                quantity=1,
                price=food.price + addition.price,
                additions=[OrderItemAddition(food_addition=addition, quantity=1, price=addition.price)],
            )
        ],
        history=[OrderState(state="SAVED", entered_by=user)],
    )
    db.add(order)
    db.commit()
    db.refresh(order)
    return order


def login(client: TestClient, email: str) -> dict:
    response = client.post("/api/auth/login", json={"email": email, "password": PASSWORD})
    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def standard_headers(client: TestClient, standard_worker: Worker) -> dict:
    """Auth headers for the standard user."""
    return login(client, STANDARD_USER["email"])


@pytest.fixture
def admin_headers(client: TestClient, admin_worker: Worker) -> dict:
    """Auth headers for the administrator."""
    return login(client, ADMIN_USER["email"])


@pytest.fixture
def limited_admin_headers(client: TestClient, limited_admin_worker: Worker) -> dict:
    """Auth headers for the administrator without permissions."""
    return login(client, "limited_admin@canteen.com")
