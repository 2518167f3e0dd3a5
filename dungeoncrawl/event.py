"""Events: things that happen in the world over one or more frames."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Event(ABC):
    """Runs for a number of frames, then may hand over to follow-up events."""

    def __init__(self, number_of_frames: int = 1) -> None:
        self.number_of_frames = number_of_frames
        self.frame_count = 0
        self.completed = False
        self.next_events: list[Event] = []

    def update(self) -> None:
        self.frame_count += 1

    def is_done(self) -> bool:
        return self.frame_count == self.number_of_frames

    @abstractmethod
    def execute(self, engine) -> None:
        """What the event does on each frame."""

    def when_done(self, engine) -> None:
        """Clean-up hook called once the event has finished; marks it completed."""
        self.completed = True

    def add_next(self, event: Event) -> Event:
        """Queue an event to start after this one finishes."""
        self.next_events.append(event)
        return event


class Events:
    """The events currently running."""

    def __init__(self) -> None:
        self._events: list[Event] = []

    def add(self, event: Event) -> Event:
        self._events.append(event)
        return event

    def execute(self, engine) -> None:
        """Advance every running event by one frame."""
        if not self._events:
            return
        follow_ups: list[Event] = []
        for event in list(self._events):
            event.execute(engine)
            event.update()
            if event.is_done():
                event.when_done(engine)
                follow_ups.extend(event.next_events)
        self._events = [event for event in self._events if not event.is_done()]
        self._events.extend(follow_ups)

    def __len__(self) -> int:
        return len(self._events)