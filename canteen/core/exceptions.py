"""
Domain-level errors raised by repositories and helpers.

Routers translate these into HTTP responses:
InvalidIdentifierError -> 400, NotFoundError -> 404.
"""


class CanteenError(Exception):
    """Base class for canteen domain errors."""


class InvalidIdentifierError(CanteenError):
    """Raised when a value cannot be used as a record identifier."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f'"{value}" is not a valid identifier')


class NotFoundError(CanteenError):
    """Raised when a record looked up by identifier does not exist."""

    entity = "Record"

    def __init__(self, identifier: object):
        self.identifier = identifier
        super().__init__(f"{self.entity} with ID: {identifier} was not found")


class UserNotFoundError(NotFoundError):
    entity = "User"


class WorkerNotFoundError(NotFoundError):
    entity = "Worker"


class DayOffNotFoundError(NotFoundError):
    entity = "Day off"


class MenuNotFoundError(NotFoundError):
    entity = "Menu"


class FoodNotFoundError(NotFoundError):
    entity = "Food"
