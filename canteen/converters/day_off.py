from canteen.converters.common import user_to_view
from canteen.models.day_off import DayOff
from canteen.schemas.worker import DayOffDetails, DayOffRequestView, WorkerReference


def day_off_to_request_view(day_off: DayOff) -> DayOffRequestView:
    worker = day_off.worker
    return DayOffRequestView(
        id=day_off.id,
        date=day_off.date,
        worker=WorkerReference(id=worker.id, person=user_to_view(worker.person)),
    )


def day_off_to_details(day_off: DayOff) -> DayOffDetails:
    resolved_by = day_off.resolved_by
    return DayOffDetails(
        id=day_off.id,
        date=day_off.date,
        state=day_off.state,
        resolved_by=user_to_view(resolved_by.person) if resolved_by is not None else None,
        resolved_date=day_off.resolved_date,
    )
