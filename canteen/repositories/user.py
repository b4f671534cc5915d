from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from canteen.core.exceptions import UserNotFoundError
from canteen.models.user import User
from canteen.repositories.base import to_uuid


@dataclass
class SaveUserCommand:
    email: str
    first_name: str
    last_name: str
    password_hash: str
    admin: bool = False


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def save_user(self, command: SaveUserCommand) -> UUID:
        """Add a user and flush it; the caller commits."""
        user = User(
            email=command.email,
            first_name=command.first_name,
            last_name=command.last_name,
            hashed_password=command.password_hash,
            admin=command.admin,
        )
        self.db.add(user)
        self.db.flush()
        return user.id

    def count_by_name(self, first_name: str, last_name: str) -> int:
        stmt = select(func.count(User.id)).where(
            User.first_name == first_name,
            User.last_name == last_name,
        )
        return self.db.execute(stmt).scalar_one()

    def find_user_by_id(self, user_id) -> User:
        user = self.db.get(User, to_uuid(user_id))
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def find_user_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def update_password(self, user_id, password_hash: str) -> User:
        user = self.find_user_by_id(user_id)
        user.hashed_password = password_hash
        self.db.commit()
        return user
