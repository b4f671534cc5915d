from datetime import date, time

from dateutil import parser as date_parser

from canteen.models.user import User
from canteen.schemas.common import UserView


def user_to_view(user: User) -> UserView:
    return UserView(
        id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
    )


def string_to_date(value: str) -> date:
    """
    Parse an ISO 8601 date or datetime string into a calendar date.

    Raises ValueError for anything else; the time part is discarded.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid date: {value!r}")
    return date_parser.isoparse(value.strip()).date()


def time_to_str(t: time) -> str:
    """Convert time object to HH:MM string."""
    return t.strftime("%H:%M")
