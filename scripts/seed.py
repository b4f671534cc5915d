"""
Seed script for the canteen development database.

Creates the first administrator (with every permission), one standard
worker and a breakfast menu, so the API can be used right after migrating.

Usage:
    alembic upgrade head
    python scripts/seed.py
"""
import os
from datetime import date, time
from decimal import Decimal

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from canteen.core.config import get_settings
from canteen.core.permissions import ALL_PERMISSIONS
from canteen.core.security import hash_password
from canteen.models import Food, FoodAddition, Menu, User, Worker, WorkHours

ADMIN_PASSWORD = os.environ.get("SEED_ADMIN_PASSWORD", "admin123")
WORKER_PASSWORD = os.environ.get("SEED_WORKER_PASSWORD", "worker123")


def office_week():
    """Monday-Friday 08:00-16:00, weekend off."""
    return [
        WorkHours(day=day, start_hour=time(8, 0), end_hour=time(16, 0))
        if day < 5 else WorkHours(day=day, start_hour=time(0, 0), end_hour=time(0, 0))
        for day in range(7)
    ]


def seed_database():
    """Seed the database with an administrator, a worker and a menu."""
    settings = get_settings()
    engine = create_engine(settings.DATABASE_URL)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()

    admin_email = f"admin@{settings.EMAIL_DOMAIN}"
    worker_email = f"jan.kowalski@{settings.EMAIL_DOMAIN}"

    try:
        # Check if data already exists
        if session.query(User).filter(User.email == admin_email).first():
            print("Database already seeded. Skipping...")
            return

        print("Seeding database...")

        admin = User(
            email=admin_email,
            first_name="Canteen",
            last_name="Admin",
            hashed_password=hash_password(ADMIN_PASSWORD),
            admin=True,
        )
        session.add(Worker(
            person=admin,
            employment_date=date.today(),
            permissions=list(ALL_PERMISSIONS),
            default_work_hours=office_week(),
        ))

        worker = User(
            email=worker_email,
            first_name="Jan",
            last_name="Kowalski",
            hashed_password=hash_password(WORKER_PASSWORD),
        )
        session.add(Worker(
            person=worker,
            employment_date=date.today(),
            permissions=[],
            default_work_hours=office_week(),
        ))

        print(f"Created users: {admin.email}, {worker.email}")

        session.add(Menu(
            name="Breakfast Menu",
            foods=[
                Food(
                    name="Omelette Sandwich",
                    price=Decimal("15.99"),
                    description="Just a fancy sandwich",
                    additions=[FoodAddition(name="Mayo", price=Decimal("0.99"))],
                ),
                Food(name="Porridge", price=Decimal("6.50")),
            ],
        ))

        print("Created sample menu")

        session.commit()
        print("\nDatabase seeded successfully!")
        print("\nCredentials:")
        print(f"  Email: {admin_email} | Password: {ADMIN_PASSWORD}")
        print(f"  Email: {worker_email} | Password: {WORKER_PASSWORD}")

    except Exception as e:
        session.rollback()
        print(f"Error seeding database: {e}")
        raise
    finally:
        session.close()


if __name__ == "__main__":
    seed_database()
