from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class ScheduleEntry:
    """One comma-separated unit of a field: `*`, `N` or `N-M`, with optional `/S`.

    `begin` and `end` both None is the wildcard. A single point keeps `end` None.
    """

    begin: int | None = None
    end: int | None = None
    step: int | None = None

    def __post_init__(self) -> None:
        if self.begin is None and self.end is not None:
            raise ValueError("entry end requires a begin")
        if self.step is not None and self.step < 1:
            raise ValueError("entry step must be at least 1")

    @classmethod
    def wildcard(cls, step: int | None = None) -> ScheduleEntry:
        return cls(None, None, step)

    @classmethod
    def single_point(cls, value: int, step: int | None = None) -> ScheduleEntry:
        return cls(value, None, step)

    @classmethod
    def range(cls, begin: int, end: int, step: int | None = None) -> ScheduleEntry:
        return cls(begin, end, step)

    @property
    def is_wildcard(self) -> bool:
        return self.begin is None

    @property
    def effective_end(self) -> int | None:
        """Upper end used for range checks: `end` if present, else `begin`."""
        return self.end if self.end is not None else self.begin


ALWAYS = ScheduleEntry()

EntrySequence = tuple[ScheduleEntry, ...]


def _always() -> EntrySequence:
    return (ALWAYS,)


@dataclass(frozen=True, slots=True)
class ScheduleDate:
    years: EntrySequence = field(default_factory=_always)
    months: EntrySequence = field(default_factory=_always)
    days: EntrySequence = field(default_factory=_always)

    @classmethod
    def always(cls) -> ScheduleDate:
        return cls()


def _zero_millis() -> EntrySequence:
    return (ScheduleEntry.single_point(0),)


@dataclass(frozen=True, slots=True)
class ScheduleTime:
    hours: EntrySequence
    minutes: EntrySequence
    seconds: EntrySequence
    milliseconds: EntrySequence = field(default_factory=_zero_millis)


@dataclass(frozen=True, slots=True)
class ScheduleFormat:
    time: ScheduleTime
    date: ScheduleDate = field(default_factory=ScheduleDate.always)
    day_of_week: EntrySequence = field(default_factory=_always)
