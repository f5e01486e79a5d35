"""Parser for schedule strings of the form ``yyyy.MM.dd w HH:mm:ss.fff``.

The date and day-of-week sections are optional, as are the milliseconds::

    yyyy.MM.dd w HH:mm:ss.fff
    yyyy.MM.dd HH:mm:ss
    w HH:mm:ss
    HH:mm:ss

Every field is a comma-separated list of ``*``, ``N`` or ``N-M``, each with an
optional ``/step``.
"""

from __future__ import annotations

from ._ast import ALWAYS, EntrySequence, ScheduleDate, ScheduleEntry, ScheduleFormat, ScheduleTime
from ._bounds import DEFAULT_BOUNDS, FieldBounds, ScheduleBounds, validate_bounds
from ._error import ScheduleError, ScheduleErrorKind, Span
from ._lexer import MAX_NUMBER
from ._parser import parse


class Schedule:
    _format: ScheduleFormat

    def __init__(self, data: ScheduleFormat) -> None:
        self._format = data

    @classmethod
    def parse(cls, input_text: str, bounds: ScheduleBounds = DEFAULT_BOUNDS) -> Schedule:
        return cls(parse(input_text, bounds))

    @classmethod
    def validate(cls, input_text: str, bounds: ScheduleBounds = DEFAULT_BOUNDS) -> bool:
        try:
            parse(input_text, bounds)
            return True
        except ScheduleError:
            return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Schedule):
            return NotImplemented
        return self._format == other._format

    def __hash__(self) -> int:
        return hash(self._format)

    def __repr__(self) -> str:
        return f"Schedule({self._format!r})"

    @property
    def format(self) -> ScheduleFormat:
        return self._format

    @property
    def date(self) -> ScheduleDate:
        return self._format.date

    @property
    def day_of_week(self) -> EntrySequence:
        return self._format.day_of_week

    @property
    def time(self) -> ScheduleTime:
        return self._format.time


__all__ = [
    "Schedule",
    "parse",
    "ScheduleError",
    "ScheduleErrorKind",
    "Span",
    "ScheduleEntry",
    "ALWAYS",
    "EntrySequence",
    "ScheduleDate",
    "ScheduleTime",
    "ScheduleFormat",
    "FieldBounds",
    "ScheduleBounds",
    "DEFAULT_BOUNDS",
    "validate_bounds",
    "MAX_NUMBER",
]
