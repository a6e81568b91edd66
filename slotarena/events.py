"""Deferred object events, applied between frames."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .enums import EventType, Layer

if TYPE_CHECKING:
    from .gameobject import GameObject


@dataclass(frozen=True)
class Event:
    """A request queued for the end of the frame; equal when type and object match."""

    type: EventType
    obj: GameObject | None = None
    layer: Layer | None = field(default=None, compare=False)


class EventManager:
    """Queues object events and applies them once per frame."""

    def __init__(self) -> None:
        self._events: list[Event] = []
        self._dead: list[GameObject] = []

    @property
    def pending(self) -> tuple[Event, ...]:
        return tuple(self._events)

    @property
    def dead_objects(self) -> tuple[GameObject, ...]:
        return tuple(self._dead)

    def delete_object(self, obj: GameObject) -> None:
        """Queue ``obj`` for deletion; queuing it again is a no-op."""
        event = Event(EventType.DELETE_OBJECT, obj)
        if event not in self._events:
            self._events.append(event)

    def update(self) -> list[GameObject]:
        """Apply queued events.

        Objects killed in the previous update are released and returned;
        objects deleted now are marked dead and held until the next update.
        """
        released, self._dead = self._dead, []
        events, self._events = self._events, []
        for event in events:
            self._execute(event)
        return released

    def _execute(self, event: Event) -> None:
        if event.type is EventType.DELETE_OBJECT and event.obj is not None:
            event.obj.set_dead()
            self._dead.append(event.obj)