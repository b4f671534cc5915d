"""
FastAPI dependencies for authentication and authorization.

Order of checks on protected routes: missing or invalid token -> 401,
authenticated user without admin rights -> 403, admin whose worker record
lacks the route's permission -> 403.
"""
from typing import Callable, Optional
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from canteen.core.permissions import Permission
from canteen.core.security import decode_token
from canteen.db.session import get_db
from canteen.models.user import User
from canteen.models.worker import Worker

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the user from a Bearer access token."""
    unauthorized = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise unauthorized

    payload = decode_token(credentials.credentials)
    if payload is None or payload.get("type") != "access":
        raise unauthorized

    user_id = payload.get("sub")
    try:
        user = db.query(User).filter(User.id == UUID(str(user_id))).first()
    except ValueError:
        raise unauthorized
    if user is None:
        raise unauthorized

    return user


def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Administrator rights required",
        )
    return current_user


def require_permission(permission: Permission) -> Callable[..., User]:
    """Dependency factory: admin whose worker record holds `permission`."""

    def check_permission(
        current_user: User = Depends(get_current_admin),
        db: Session = Depends(get_db),
    ) -> User:
        worker = db.query(Worker).filter(Worker.person_id == current_user.id).first()
        if worker is None or permission.value not in (worker.permissions or []):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Missing permission {permission.value}",
            )
        return current_user

    return check_permission
