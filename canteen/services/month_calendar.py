"""
Month calendar for the worker schedule.

Combines every worker's default week with the day-off records of the
requested month: a worker is present on a date when their default hours for
that weekday are working hours and they have no approved day off on that
date. Unresolved requests are listed per date so an administrator can act
on them from the calendar.
"""
import calendar
from collections import defaultdict
from datetime import date
from typing import Dict, List, Set
from uuid import UUID

from sqlalchemy.orm import Session

from canteen.converters.day_off import day_off_to_request_view
from canteen.converters.worker import worker_to_calendar_view, worker_to_view
from canteen.models.day_off import DayOff, DayOffState
from canteen.models.worker import Worker
from canteen.repositories.day_off import DayOffFilter, DayOffRepository
from canteen.repositories.worker import WorkerRepository
from canteen.schemas.worker import DayView, MonthResponse, WorkerView
from canteen.services.work_hours import DAYS_IN_WEEK, is_working


def get_month_weeks(year: int, month: int) -> List[List[date]]:
    """
    Dates of a month grouped into Monday-first weeks.

    Only dates belonging to the month are returned, so the first and last
    weeks may be shorter than seven days.
    """
    weeks = calendar.Calendar(firstweekday=calendar.MONDAY).monthdatescalendar(year, month)
    return [[day for day in week if day.month == month] for week in weeks]


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First day of the month and first day of the following month."""
    start = date(year, month, 1)
    end = date(year + 1, 1, 1) if month == 12 else date(year, month + 1, 1)
    return start, end


def calculate_default_week(workers: List[Worker]) -> List[List[WorkerView]]:
    """Workers working on each weekday (0=Monday) according to their defaults."""
    default_week: List[List[WorkerView]] = [[] for _ in range(DAYS_IN_WEEK)]
    for worker in workers:
        view = worker_to_view(worker)
        for hours in worker.default_work_hours:
            if is_working(hours):
                default_week[hours.day].append(view)
    return default_week


class MonthCalendarService:
    def __init__(self, db: Session):
        self.workers = WorkerRepository(db)
        self.days_off = DayOffRepository(db)

    def calculate_month(self, year: int, month: int) -> MonthResponse:
        start, end = month_bounds(year, month)
        default_week = calculate_default_week(self.workers.get_all_workers())

        approved: Dict[UUID, Set[date]] = defaultdict(set)
        for day_off in self.days_off.find(DayOffFilter(
            states=[DayOffState.APPROVED], date_from=start, date_to=end,
        )):
            approved[day_off.worker_id].add(day_off.date)

        requests: Dict[date, List[DayOff]] = defaultdict(list)
        for day_off in self.days_off.find(DayOffFilter(
            states=[DayOffState.UNRESOLVED], date_from=start, date_to=end,
        )):
            requests[day_off.date].append(day_off)

        weeks = []
        for week in get_month_weeks(year, month):
            days = {}
            for day in week:
                weekday = day.weekday()
                present = [
                    worker_to_calendar_view(worker, weekday)
                    for worker in default_week[weekday]
                    if day not in approved[worker.id]
                ]
                days[day.isoformat()] = DayView(
                    workers_present=present,
                    requests=[day_off_to_request_view(r) for r in requests[day]],
                )
            weeks.append(days)

        return MonthResponse(year=year, month=month, weeks=weeks)
