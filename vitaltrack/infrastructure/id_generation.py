"""IdGenerator implementations."""

import itertools
import uuid

from vitaltrack.application.shared.id_generator import IdGenerator
from .config import Settings


class UuidIdGenerator:
    """Random UUID4 identifiers."""

    def new_id(self) -> str:
        return str(uuid.uuid4())


class SequentialIdGenerator:
    """
    Deterministic identifiers: prefix + 1, 2, 3...

    Example:
        >>> ids = SequentialIdGenerator(prefix="g-")
        >>> ids.new_id(), ids.new_id()
        ('g-1', 'g-2')
    """

    def __init__(self, prefix: str = "", start: int = 1):
        self._prefix = prefix
        self._counter = itertools.count(start)

    def new_id(self) -> str:
        return f"{self._prefix}{next(self._counter)}"


def create_id_generator(settings: Settings) -> IdGenerator:
    if settings.id_strategy == "sequential":
        return SequentialIdGenerator(prefix=settings.id_prefix)
    return UuidIdGenerator()
