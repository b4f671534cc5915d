from datetime import time
from typing import List, Tuple

from canteen.converters.common import time_to_str, user_to_view
from canteen.converters.day_off import day_off_to_details
from canteen.models.day_off import DayOff
from canteen.models.worker import Worker, WorkHours
from canteen.schemas.worker import (
    WorkDayDetails,
    WorkHoursCreateRequest,
    WorkHoursView,
    WorkerCalendarView,
    WorkerDetailsResponse,
    WorkerListItem,
    WorkerView,
)
from canteen.services.work_hours import is_working


def work_hours_to_view(hours: WorkHours) -> WorkHoursView:
    return WorkHoursView(day=hours.day, start_hour=hours.start_hour, end_hour=hours.end_hour)


def work_hours_to_work_day_details(hours: WorkHours) -> WorkDayDetails:
    return WorkDayDetails(
        day=hours.day,
        start=time_to_str(hours.start_hour),
        end=time_to_str(hours.end_hour),
        working=is_working(hours),
    )


def work_hours_request_to_model(request: WorkHoursCreateRequest) -> Tuple[int, time, time]:
    """Convert a validated request entry into (day, start, end)."""
    return (
        request.day_of_the_week,
        time(request.start.hour, request.start.minute),
        time(request.end.hour, request.end.minute),
    )


def worker_to_view(worker: Worker) -> WorkerView:
    return WorkerView(
        id=worker.id,
        person=user_to_view(worker.person),
        default_work_hours=[work_hours_to_view(h) for h in worker.default_work_hours],
    )


def worker_to_list_item(worker: Worker) -> WorkerListItem:
    return WorkerListItem(
        id=worker.id,
        person=user_to_view(worker.person),
        employment_date=worker.employment_date,
        default_work_hours=[work_hours_to_view(h) for h in worker.default_work_hours],
    )


def worker_to_calendar_view(worker: WorkerView, day: int) -> WorkerCalendarView:
    hours = next(h for h in worker.default_work_hours if h.day == day)
    return WorkerCalendarView(id=worker.id, person=worker.person, work_hours=hours)


def worker_to_details_response(worker: Worker, requests: List[DayOff]) -> WorkerDetailsResponse:
    return WorkerDetailsResponse(
        id=worker.id,
        person=user_to_view(worker.person),
        employed_date=worker.employment_date,
        permissions=list(worker.permissions or []),
        work_days=[work_hours_to_work_day_details(h) for h in worker.default_work_hours],
        requests=[day_off_to_details(request) for request in requests],
    )
