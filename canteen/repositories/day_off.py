from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import List, Optional, Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from canteen.core.exceptions import DayOffNotFoundError
from canteen.models.day_off import DayOff, DayOffState
from canteen.models.worker import Worker
from canteen.repositories.base import to_uuid


@dataclass
class DayOffFilter:
    """Criteria for DayOffRepository.find; unset fields do not filter."""
    worker_id: Optional[Union[UUID, str]] = None
    states: Optional[List[DayOffState]] = None
    on_date: Optional[date] = None
    date_from: Optional[date] = None
    # exclusive
    date_to: Optional[date] = None


@dataclass
class SaveDayOffCommand:
    worker: Worker
    date: date


class DayOffRepository:
    def __init__(self, db: Session):
        self.db = db

    def find(self, criteria: DayOffFilter) -> List[DayOff]:
        stmt = select(DayOff).options(
            selectinload(DayOff.worker).selectinload(Worker.person),
            selectinload(DayOff.resolved_by).selectinload(Worker.person),
        )

        if criteria.worker_id is not None:
            stmt = stmt.where(DayOff.worker_id == to_uuid(criteria.worker_id))
        if criteria.states:
            stmt = stmt.where(DayOff.state.in_([DayOffState(s).value for s in criteria.states]))
        if criteria.on_date is not None:
            stmt = stmt.where(DayOff.date == criteria.on_date)
        if criteria.date_from is not None:
            stmt = stmt.where(DayOff.date >= criteria.date_from)
        if criteria.date_to is not None:
            stmt = stmt.where(DayOff.date < criteria.date_to)

        stmt = stmt.order_by(DayOff.date.asc(), DayOff.created_at.asc())
        return list(self.db.execute(stmt).scalars().all())

    def find_day_off_by_id(self, day_off_id) -> DayOff:
        day_off = self.db.get(DayOff, to_uuid(day_off_id))
        if day_off is None:
            raise DayOffNotFoundError(day_off_id)
        return day_off

    def save(self, command: SaveDayOffCommand) -> DayOff:
        day_off = DayOff(
            worker=command.worker,
            date=command.date,
            state=DayOffState.UNRESOLVED.value,
        )
        self.db.add(day_off)
        self.db.commit()
        self.db.refresh(day_off)
        return day_off

    def resolve(self, day_off: DayOff, state: DayOffState, resolved_by: Worker) -> DayOff:
        day_off.state = DayOffState(state).value
        day_off.resolved_by = resolved_by
        day_off.resolved_date = datetime.now(timezone.utc)
        self.db.commit()
        self.db.refresh(day_off)
        return day_off
