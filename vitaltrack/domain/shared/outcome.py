"""Tagged creation outcomes.

Factories expose ``try_*`` variants that return either ``Created`` or
``Rejected`` so callers can branch on the tag instead of catching.

Example:
    >>> outcome = FoodEntryFactory.try_create(...)
    >>> if isinstance(outcome, Rejected):
    ...     print(outcome.code, outcome.message)
    ... else:
    ...     entry = outcome.value
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from .errors import ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class Created(Generic[T]):
    """Successful creation carrying the valid instance."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    """Creation refused by a validation rule."""

    error: ValidationError

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def code(self) -> str:
        return self.error.code


CreationOutcome = Union[Created[T], Rejected]


def attempt(build: Callable[[], T]) -> "CreationOutcome[T]":
    """Run a raising constructor and wrap its result in a tagged outcome.

    Only validation failures are captured; any other exception propagates.
    """
    try:
        return Created(build())
    except ValidationError as error:
        return Rejected(error)
