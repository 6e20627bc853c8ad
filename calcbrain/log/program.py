"""
Program: the in-memory input log.

The program is the engine's only persistent state. It is append-only except
for clear() and undo(), which truncate it.
"""

from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from ..core.events import InputEvent, event_from_dict


class Program:
    """
    Ordered log of input events.

    Guarantees:
    - Events are immutable once appended
    - read() yields events in append order
    - undo() removes exactly the last event
    """

    def __init__(self, events: Iterable[InputEvent] = ()) -> None:
        self._events: List[InputEvent] = list(events)

    def append(self, event: InputEvent) -> int:
        """
        Append event to the log.

        Returns:
            Index assigned to the event
        """
        self._events.append(event)
        return len(self._events) - 1

    def undo(self) -> Optional[InputEvent]:
        """
        Remove the last event.

        Returns:
            The removed event, or None if the program was empty
        """
        if not self._events:
            return None
        return self._events.pop()

    def clear(self) -> None:
        self._events.clear()

    def read(self, to_index: Optional[int] = None) -> Iterator[InputEvent]:
        """
        Read events in order.

        Args:
            to_index: Stop before this index (None = all events)

        Raises:
            ValueError: If to_index is negative
        """
        if to_index is not None and to_index < 0:
            raise ValueError(f"to_index must be >= 0, got {to_index}")
        events = self._events if to_index is None else self._events[:to_index]
        return iter(list(events))

    def snapshot(self) -> Tuple[InputEvent, ...]:
        return tuple(self._events)

    def to_records(self) -> List[Dict[str, Any]]:
        return [ev.to_dict() for ev in self._events]

    @staticmethod
    def from_records(records: Iterable[Dict[str, Any]]) -> "Program":
        """
        Rebuild a program from to_records() output.

        Raises:
            InvalidEventError: If any record is malformed
        """
        return Program(event_from_dict(rec) for rec in records)

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[InputEvent]:
        return self.read()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Program):
            return NotImplemented
        return self._events == other._events

    def __repr__(self) -> str:
        return f"Program({self._events!r})"
