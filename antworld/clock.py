"""Global simulation clock and the elements that age with it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar


class TimedElement(ABC):
    """Anything that changes state once per clock tick."""

    @abstractmethod
    def update(self) -> None:
        """Advance this element by one tick."""


class Clock:
    """Drives every subscribed element forward one tick at a time."""

    _instance: ClassVar[Clock | None] = None

    def __init__(self) -> None:
        self._elements: list[TimedElement] = []

    @property
    def elements(self) -> list[TimedElement]:
        """The subscribed elements, in subscription order."""
        return list(self._elements)

    def tick(self) -> None:
        """Update every subscribed element, in subscription order."""
        for element in list(self._elements):
            element.update()

    def subscribe(self, element: TimedElement) -> None:
        """Register an element to be updated on each tick."""
        self._elements.append(element)

    @classmethod
    def instance(cls) -> Clock:
        """Return the shared clock, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance