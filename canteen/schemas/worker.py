"""
Worker Pydantic schemas: creation, details, permissions, days off and the
month calendar.
"""
from datetime import date, datetime, time
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from canteen.schemas.common import UserView


# ============ Requests ============

class HourMinute(BaseModel):
    hour: int
    minute: int


class WorkHoursCreateRequest(BaseModel):
    """Work hours for one day of the week (0=Monday, 6=Sunday)."""
    day_of_the_week: int
    start: HourMinute
    end: HourMinute


class WorkerCreateRequest(BaseModel):
    """Request model for creating a worker; work hours default when omitted."""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    work_hours: Optional[List[WorkHoursCreateRequest]] = None
    employment_date: Optional[date] = None


class WorkerPermissionsUpdate(BaseModel):
    permissions: List[str]


class DayOffCreateRequest(BaseModel):
    """Dates (ISO strings) the current worker wants off."""
    dates: List[str]


class DayOffChangeStateRequest(BaseModel):
    id: str
    state: str


class WorkerPasswordResetRequest(BaseModel):
    worker_id: str


# ============ Responses ============

class WorkerCreateResponse(BaseModel):
    """Generated credentials, returned once."""
    email: str
    password: str


class WorkerPasswordResetResponse(BaseModel):
    email: str
    password: str


class WorkHoursView(BaseModel):
    day: int
    start_hour: time
    end_hour: time

    model_config = ConfigDict(from_attributes=True)


class WorkerListItem(BaseModel):
    id: UUID
    person: UserView
    employment_date: date
    default_work_hours: List[WorkHoursView]


class WorkerListResponse(BaseModel):
    workers: List[WorkerListItem]


class WorkDayDetails(BaseModel):
    """A day of the default week, times formatted as HH:MM."""
    day: int
    start: str
    end: str
    working: bool


class DayOffDetails(BaseModel):
    id: UUID
    date: date
    state: str
    resolved_by: Optional[UserView] = None
    resolved_date: Optional[datetime] = None


class WorkerDetailsResponse(BaseModel):
    id: UUID
    person: UserView
    employed_date: date
    permissions: List[str]
    work_days: List[WorkDayDetails]
    requests: List[DayOffDetails]


# ============ Month calendar ============

class WorkerView(BaseModel):
    id: UUID
    person: UserView
    default_work_hours: List[WorkHoursView]


class WorkerCalendarView(BaseModel):
    """A worker present on a given day with that day's hours."""
    id: UUID
    person: UserView
    work_hours: WorkHoursView


class WorkerReference(BaseModel):
    id: UUID
    person: UserView


class DayOffRequestView(BaseModel):
    """Unresolved day-off request shown in the calendar."""
    id: UUID
    date: date
    worker: WorkerReference


class DayView(BaseModel):
    workers_present: List[WorkerCalendarView]
    requests: List[DayOffRequestView]


class MonthResponse(BaseModel):
    """Weeks of the month, each mapping ISO dates to that day's view."""
    year: int
    month: int
    weeks: List[Dict[str, DayView]]
