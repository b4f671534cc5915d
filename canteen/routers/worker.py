"""
Worker router: worker accounts, permissions, day-off workflow and the month
calendar.

All endpoints require an administrator, except submitting a day-off request
which any worker can do for themselves.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from canteen.converters.common import string_to_date
from canteen.converters.worker import (
    work_hours_request_to_model,
    worker_to_details_response,
    worker_to_list_item,
)
from canteen.core.deps import get_current_admin, get_current_user
from canteen.core.exceptions import (
    DayOffNotFoundError,
    InvalidIdentifierError,
    WorkerNotFoundError,
)
from canteen.core.security import hash_password
from canteen.db.session import get_db
from canteen.models.day_off import DayOffState
from canteen.models.user import User
from canteen.models.worker import Worker
from canteen.repositories.day_off import DayOffFilter, DayOffRepository, SaveDayOffCommand
from canteen.repositories.user import SaveUserCommand, UserRepository
from canteen.repositories.worker import SaveWorkerCommand, WorkerRepository
from canteen.schemas.worker import (
    DayOffChangeStateRequest,
    DayOffCreateRequest,
    MonthResponse,
    WorkerCreateRequest,
    WorkerCreateResponse,
    WorkerDetailsResponse,
    WorkerListResponse,
    WorkerPasswordResetRequest,
    WorkerPasswordResetResponse,
    WorkerPermissionsUpdate,
)
from canteen.services.accounts import generate_email, generate_password
from canteen.services.day_off import DayOffService
from canteen.services.month_calendar import MonthCalendarService
from canteen.services.work_hours import generate_default_work_hours
from canteen.validators.worker import (
    validate_day_off_change,
    validate_day_off_request,
    validate_permissions,
    validate_worker_create,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/worker", tags=["worker"])


def bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def not_found(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


def get_worker_or_error(db: Session, worker_id: str) -> Worker:
    """Load a worker, raise 400 for a malformed id and 404 if missing."""
    try:
        return WorkerRepository(db).find_worker_by_id(worker_id)
    except InvalidIdentifierError as e:
        raise bad_request(str(e))
    except WorkerNotFoundError as e:
        raise not_found(str(e))


@router.get("", response_model=WorkerListResponse)
def list_workers(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
):
    """List every worker with their default week."""
    workers = WorkerRepository(db).get_all_workers()
    return WorkerListResponse(workers=[worker_to_list_item(worker) for worker in workers])


@router.post("", response_model=WorkerCreateResponse, status_code=status.HTTP_201_CREATED)
def create_worker(
    request: WorkerCreateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
):
    """
    Create a user account and its worker record.

    The email is generated from the worker's name and the password is
    random; both are returned once in the response. Without `work_hours`
    the default week (Monday-Friday 08:00-16:00) is used.
    """
    if request.work_hours is None:
        request.work_hours = generate_default_work_hours()

    if not validate_worker_create(request):
        raise bad_request("Invalid worker")

    first_name = request.first_name.strip()
    last_name = request.last_name.strip()

    users = UserRepository(db)
    email = generate_email(users, first_name, last_name)
    password = generate_password()

    # user and worker are committed together by save_worker
    try:
        user_id = users.save_user(SaveUserCommand(
            email=email,
            first_name=first_name,
            last_name=last_name,
            password_hash=hash_password(password),
        ))
        WorkerRepository(db).save_worker(SaveWorkerCommand(
            user_id=user_id,
            work_hours=[work_hours_request_to_model(hours) for hours in request.work_hours],
            employment_date=request.employment_date,
        ))
    except SQLAlchemyError:
        db.rollback()
        logger.error(f"Failed to create worker account {email}", exc_info=True)
        raise
    logger.info(f"Created worker account {email}")

    return WorkerCreateResponse(email=email, password=password)


@router.get("/month/{year}/{month}", response_model=MonthResponse)
def get_month(
    year: int,
    month: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
):
    """
    Calendar of the month (1-12): workers present each day and the
    unresolved day-off requests for that day.
    """
    if not 1 <= month <= 12 or not 1 <= year <= 9999:
        raise bad_request(f"Invalid month: {year}-{month}")

    return MonthCalendarService(db).calculate_month(year, month)


@router.post("/dayoff")
def create_day_off_request(
    request: DayOffCreateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Request days off for the current worker.

    Dates the worker already asked for (and that were not rejected) are
    skipped.
    """
    if not validate_day_off_request(request):
        raise bad_request("Invalid day off request")

    try:
        worker = WorkerRepository(db).find_worker_by_user_id(current_user.id)
    except WorkerNotFoundError as e:
        raise not_found(str(e))

    dates = [string_to_date(value) for value in request.dates]
    dates = DayOffService(db).filter_out_existing_dates(dates, worker.id)

    repository = DayOffRepository(db)
    for day in dates:
        repository.save(SaveDayOffCommand(worker=worker, date=day))

    return {"created": [day.isoformat() for day in dates]}


@router.put("/dayoff")
def change_day_off_state(
    request: DayOffChangeStateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
):
    """Approve or reject a day-off request."""
    if not validate_day_off_change(request):
        raise bad_request("Invalid day off state change")

    repository = DayOffRepository(db)
    try:
        day_off = repository.find_day_off_by_id(request.id)
    except InvalidIdentifierError as e:
        raise bad_request(str(e))
    except DayOffNotFoundError as e:
        raise not_found(str(e))

    try:
        resolver = WorkerRepository(db).find_worker_by_user_id(current_user.id)
    except WorkerNotFoundError:
        resolver = None

    repository.resolve(day_off, DayOffState(request.state), resolver)
    logger.info(f"Day off {day_off.id} marked {request.state} by {current_user.email}")

    return {"id": str(day_off.id), "state": day_off.state}


@router.post("/password/reset", response_model=WorkerPasswordResetResponse)
def reset_password(
    request: WorkerPasswordResetRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
):
    """Generate a new password for a worker and return it once."""
    if not request.worker_id.strip():
        raise bad_request("Worker id is required")

    worker = get_worker_or_error(db, request.worker_id)
    password = generate_password()
    user = UserRepository(db).update_password(worker.person_id, hash_password(password))
    logger.info(f"Password reset for {user.email}")

    return WorkerPasswordResetResponse(email=user.email, password=password)


@router.get("/{worker_id}", response_model=WorkerDetailsResponse)
def get_worker_details(
    worker_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
):
    """Worker profile, default week and every day-off request."""
    worker = get_worker_or_error(db, worker_id)
    requests = DayOffRepository(db).find(DayOffFilter(worker_id=worker.id))
    return worker_to_details_response(worker, requests)


@router.get("/{worker_id}/permissions", response_model=List[str])
def get_permissions(
    worker_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
):
    worker = get_worker_or_error(db, worker_id)
    return list(worker.permissions or [])


@router.put("/{worker_id}/permissions", response_model=List[str])
def update_permissions(
    worker_id: str,
    request: WorkerPermissionsUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
):
    """Replace the worker's permissions with the given list."""
    if not validate_permissions(request.permissions):
        raise bad_request("Unknown permission")

    try:
        worker = WorkerRepository(db).update_permissions(worker_id, request.permissions)
    except InvalidIdentifierError as e:
        raise bad_request(str(e))
    except WorkerNotFoundError as e:
        raise not_found(str(e))

    return list(worker.permissions)
