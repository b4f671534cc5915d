from typing import Iterable, Optional

from canteen.converters.common import string_to_date
from canteen.core.permissions import ALL_PERMISSIONS
from canteen.models.day_off import DayOffState
from canteen.schemas.worker import (
    DayOffChangeStateRequest,
    DayOffCreateRequest,
    HourMinute,
    WorkerCreateRequest,
)
from canteen.services.work_hours import DAYS_IN_WEEK

RESOLVED_STATES = {DayOffState.APPROVED.value, DayOffState.REJECTED.value}


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _valid_hour(value: HourMinute) -> bool:
    return 0 <= value.hour <= 23 and 0 <= value.minute <= 59


def validate_worker_create(request: WorkerCreateRequest) -> bool:
    """
    Names must be present and the week complete: one entry per weekday,
    valid clock times, start not after end.
    """
    if _is_blank(request.first_name) or _is_blank(request.last_name):
        return False

    work_hours = request.work_hours or []
    if len(work_hours) != DAYS_IN_WEEK:
        return False
    if sorted(h.day_of_the_week for h in work_hours) != list(range(DAYS_IN_WEEK)):
        return False

    for hours in work_hours:
        if not (_valid_hour(hours.start) and _valid_hour(hours.end)):
            return False
        if (hours.start.hour, hours.start.minute) > (hours.end.hour, hours.end.minute):
            return False

    return True


def validate_day_off_request(request: DayOffCreateRequest) -> bool:
    if not request.dates:
        return False
    try:
        for value in request.dates:
            string_to_date(value)
    except (ValueError, OverflowError):
        return False
    return True


def validate_day_off_change(request: DayOffChangeStateRequest) -> bool:
    return not _is_blank(request.id) and request.state in RESOLVED_STATES


def validate_permissions(permissions: Iterable[str]) -> bool:
    return all(permission in ALL_PERMISSIONS for permission in permissions)
