"""IdGenerator port - identifiers are injected, never generated by entities."""

from typing import Protocol


class IdGenerator(Protocol):
    """
    Source of new entity identifiers.

    Example:
        >>> class FixedIds:
        ...     def new_id(self) -> str:
        ...         return "fixed"
    """

    def new_id(self) -> str:
        ...
