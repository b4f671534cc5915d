from dataclasses import dataclass, field
from datetime import date, time
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from canteen.core.exceptions import WorkerNotFoundError
from canteen.models.worker import Worker, WorkHours
from canteen.repositories.base import to_uuid


@dataclass
class SaveWorkerCommand:
    user_id: UUID
    # (day, start, end) for each day of the week
    work_hours: List[Tuple[int, time, time]]
    employment_date: Optional[date] = None
    permissions: List[str] = field(default_factory=list)


class WorkerRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_all_workers(self) -> List[Worker]:
        stmt = (
            select(Worker)
            .options(selectinload(Worker.person), selectinload(Worker.default_work_hours))
            .order_by(Worker.created_at.asc(), Worker.id.asc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def find_worker_by_id(self, worker_id) -> Worker:
        worker = self.db.get(Worker, to_uuid(worker_id))
        if worker is None:
            raise WorkerNotFoundError(worker_id)
        return worker

    def find_worker_by_user_id(self, user_id) -> Worker:
        worker = self.db.query(Worker).filter(Worker.person_id == to_uuid(user_id)).first()
        if worker is None:
            raise WorkerNotFoundError(f"user:{user_id}")
        return worker

    def save_worker(self, command: SaveWorkerCommand) -> Worker:
        worker = Worker(
            person_id=command.user_id,
            employment_date=command.employment_date or date.today(),
            permissions=list(command.permissions),
            default_work_hours=[
                WorkHours(day=day, start_hour=start, end_hour=end)
                for day, start, end in command.work_hours
            ],
        )
        self.db.add(worker)
        self.db.commit()
        self.db.refresh(worker)
        return worker

    def update_permissions(self, worker_id, permissions: List[str]) -> Worker:
        worker = self.find_worker_by_id(worker_id)
        # reassigned, not mutated, so the JSON column is flagged dirty
        worker.permissions = list(dict.fromkeys(permissions))
        self.db.commit()
        return worker
