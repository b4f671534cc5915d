from datetime import date
from typing import Iterable, List

from sqlalchemy.orm import Session

from canteen.models.day_off import DayOffState
from canteen.repositories.day_off import DayOffFilter, DayOffRepository

# States that block another request for the same date
BLOCKING_STATES = [DayOffState.UNRESOLVED, DayOffState.APPROVED]


class DayOffService:
    """Day-off request workflow helpers."""

    def __init__(self, db: Session):
        self.repository = DayOffRepository(db)

    def filter_out_existing_dates(self, dates: Iterable[date], worker_id) -> List[date]:
        """
        Drop duplicate dates and dates the worker already asked for.

        Dates with a rejected request may be requested again. Order of the
        remaining dates is preserved.
        """
        existing = {
            day_off.date
            for day_off in self.repository.find(DayOffFilter(worker_id=worker_id, states=BLOCKING_STATES))
        }

        result = []
        for day in dates:
            if day in existing:
                continue
            existing.add(day)
            result.append(day)
        return result
