from typing import Iterable, List
from uuid import UUID

from canteen.core.exceptions import InvalidIdentifierError


def to_uuid(value) -> UUID:
    """Parse a record identifier, raising InvalidIdentifierError if malformed."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError):
        raise InvalidIdentifierError(value) from None


def to_uuids(values: Iterable) -> List[UUID]:
    return [to_uuid(value) for value in values]
