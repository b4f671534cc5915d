"""
Default weekly schedule helpers.
"""
from datetime import time
from typing import List

from canteen.schemas.worker import HourMinute, WorkHoursCreateRequest

DAYS_IN_WEEK = 7

# Monday to Friday 08:00-16:00, weekend off
DEFAULT_START = HourMinute(hour=8, minute=0)
DEFAULT_END = HourMinute(hour=16, minute=0)
DAY_OFF = HourMinute(hour=0, minute=0)
WORKING_DAYS = range(0, 5)


def generate_default_work_hours() -> List[WorkHoursCreateRequest]:
    """Work hours used for a new worker created without a schedule."""
    week = []
    for day in range(DAYS_IN_WEEK):
        if day in WORKING_DAYS:
            week.append(WorkHoursCreateRequest(day_of_the_week=day, start=DEFAULT_START, end=DEFAULT_END))
        else:
            week.append(WorkHoursCreateRequest(day_of_the_week=day, start=DAY_OFF, end=DAY_OFF))
    return week


def is_working(hours) -> bool:
    """
    A day counts as worked unless it starts and ends at the same minute.

    Accepts anything with `start_hour` and `end_hour` times.
    """
    start: time = hours.start_hour
    end: time = hours.end_hour
    return (start.hour, start.minute) != (end.hour, end.minute)
