from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ._ast import ScheduleEntry
from ._error import ScheduleError, Span


@dataclass(frozen=True, slots=True)
class FieldBounds:
    label: str
    min: int
    max: int

    def violation(self, entry: ScheduleEntry) -> bool:
        """True when a non-wildcard entry falls outside [min, max] or runs backwards."""
        if entry.begin is None:
            return False
        end = entry.effective_end
        assert end is not None
        return entry.begin < self.min or entry.begin > self.max or end < entry.begin or end > self.max


@dataclass(frozen=True, slots=True)
class ScheduleBounds:
    year: FieldBounds = FieldBounds("Year", 2000, 2100)
    month: FieldBounds = FieldBounds("Month", 1, 12)
    # 32 stands for the last day of the month
    day: FieldBounds = FieldBounds("Day", 1, 32)
    # 0 is Sunday, 6 is Saturday
    day_of_week: FieldBounds = FieldBounds("Day of week", 0, 6)
    hour: FieldBounds = FieldBounds("Hour", 0, 23)
    minute: FieldBounds = FieldBounds("Min", 0, 59)
    second: FieldBounds = FieldBounds("Sec", 0, 59)
    millisecond: FieldBounds = FieldBounds("Millis", 0, 999)


DEFAULT_BOUNDS = ScheduleBounds()


def validate_bounds(
    entries: Iterable[ScheduleEntry],
    bounds: FieldBounds,
    span: Span | None = None,
    input_text: str | None = None,
) -> None:
    """Raise a bounds ScheduleError for the first entry outside `bounds`."""
    for entry in entries:
        if bounds.violation(entry):
            raise ScheduleError.bounds(
                f"{bounds.label} component ({entry.begin}, {entry.effective_end})"
                f" is out of bounds ({bounds.min}, {bounds.max})",
                bounds.label,
                span,
                input_text,
            )
