from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from ._ast import ALWAYS, EntrySequence, ScheduleDate, ScheduleEntry, ScheduleFormat, ScheduleTime
from ._bounds import DEFAULT_BOUNDS, FieldBounds, ScheduleBounds, validate_bounds
from ._error import ScheduleError, Span
from ._lexer import (
    TColon,
    TComma,
    TDash,
    TDot,
    TNumber,
    Token,
    TokenKind,
    TSlash,
    TSpace,
    TStar,
    tokenize,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_SEPARATOR_NAMES: dict[type, str] = {
    TDot: "'.'",
    TColon: "':'",
    TSpace: "' '",
}


class _Parser:
    def __init__(self, tokens: list[Token], input_text: str, bounds: ScheduleBounds) -> None:
        self._tokens = tokens
        self._pos = 0
        self._input = input_text
        self._bounds = bounds

    def peek(self) -> Token | None:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def peek_kind(self) -> TokenKind | None:
        tok = self.peek()
        return tok.kind if tok else None

    def advance(self) -> Token | None:
        tok = self.peek()
        if tok:
            self._pos += 1
        return tok

    def current_span(self) -> Span:
        tok = self.peek()
        if tok:
            return tok.span
        end = len(self._input)
        return Span(end, end)

    def _consumed_end(self) -> int:
        if self._pos == 0:
            return 0
        return self._tokens[self._pos - 1].span.end

    def _error(self, message: str, span: Span) -> ScheduleError:
        return ScheduleError.syntax(message, span, self._input)

    # --- Grammar productions ---

    def parse_schedule(self) -> ScheduleFormat:
        failures: list[ScheduleError] = []
        date = self._attempt(self._parse_date_section, failures)
        day_of_week = self._attempt(self._parse_day_of_week_section, failures)

        try:
            time = self._parse_time()
        except ScheduleError as err:
            raise _most_relevant([*failures, err]) from None

        return ScheduleFormat(
            time=time,
            date=date if date is not None else ScheduleDate.always(),
            day_of_week=day_of_week if day_of_week is not None else (ALWAYS,),
        )

    def _attempt(self, production: Callable[[], T], failures: list[ScheduleError]) -> T | None:
        """Run an optional production, rewinding to the saved position if it fails."""
        saved = self._pos
        try:
            return production()
        except ScheduleError as err:
            logger.debug(
                "optional section at offset %d rewound: %s", self.current_span().start, err
            )
            failures.append(err)
            self._pos = saved
            return None

    def _parse_date_section(self) -> ScheduleDate:
        years = self._parse_field(self._bounds.year, TDot)
        months = self._parse_field(self._bounds.month, TDot)
        days = self._parse_field(self._bounds.day, TSpace)
        return ScheduleDate(years, months, days)

    def _parse_day_of_week_section(self) -> EntrySequence:
        return self._parse_field(self._bounds.day_of_week, TSpace)

    def _parse_time(self) -> ScheduleTime:
        hours = self._parse_field(self._bounds.hour, TColon)
        minutes = self._parse_field(self._bounds.minute, TColon)
        seconds = self._parse_field(self._bounds.second)

        if isinstance(self.peek_kind(), TDot):
            self.advance()
            milliseconds = self._parse_field(self._bounds.millisecond)
            return ScheduleTime(hours, minutes, seconds, milliseconds)

        return ScheduleTime(hours, minutes, seconds)

    def _parse_field(self, bounds: FieldBounds, separator: type | None = None) -> EntrySequence:
        """Parse and check one field, then consume its separator if it has one.

        The separator is only peeked before the checks run, so a field in the
        wrong grammar branch fails on structure rather than on its values.
        """
        start = self.current_span().start
        entries = self._parse_sequence()
        span = Span(start, self._consumed_end())

        if separator is not None and not isinstance(self.peek_kind(), separator):
            raise self._error(
                f"expected {_SEPARATOR_NAMES[separator]} after {bounds.label.lower()}",
                self.current_span(),
            )

        if len(entries) > 1 and ALWAYS in entries:
            raise ScheduleError.wildcard(bounds.label, span, self._input)
        validate_bounds(entries, bounds, span, self._input)

        if separator is not None:
            self.advance()
        return entries

    def _parse_sequence(self) -> EntrySequence:
        entries: list[ScheduleEntry] = [self._parse_entry()]
        while isinstance(self.peek_kind(), TComma):
            self.advance()
            # a trailing comma ends the list
            if not isinstance(self.peek_kind(), (TStar, TNumber)):
                break
            entries.append(self._parse_entry())
        return tuple(entries)

    def _parse_entry(self) -> ScheduleEntry:
        k = self.peek_kind()
        begin: int | None = None
        end: int | None = None

        if isinstance(k, TStar):
            self.advance()
        elif isinstance(k, TNumber):
            self.advance()
            begin = k.value
            if isinstance(self.peek_kind(), TDash):
                self.advance()
                end = self._parse_number("expected number after '-'")
        else:
            raise self._error("expected '*' or number", self.current_span())

        step: int | None = None
        if isinstance(self.peek_kind(), TSlash):
            self.advance()
            span = self.current_span()
            step = self._parse_number("expected step after '/'")
            if step == 0:
                raise self._error("step must be at least 1", span)

        return ScheduleEntry(begin, end, step)

    def _parse_number(self, error_msg: str) -> int:
        k = self.peek_kind()
        if isinstance(k, TNumber):
            self.advance()
            return k.value
        raise self._error(error_msg, self.current_span())


def _progress(err: ScheduleError) -> int:
    # How far the failing attempt got: syntax errors stop at the bad token,
    # value errors come after their whole sequence.
    if err.span is None:
        return 0
    return err.span.start if err.kind == "syntax" else err.span.end


def _most_relevant(errors: list[ScheduleError]) -> ScheduleError:
    best = errors[0]
    for err in errors[1:]:
        if (_progress(err), err.kind != "syntax") > (_progress(best), best.kind != "syntax"):
            best = err
    return best


def parse(input_text: str, bounds: ScheduleBounds = DEFAULT_BOUNDS) -> ScheduleFormat:
    tokens = tokenize(input_text)

    if not tokens:
        raise ScheduleError.syntax("empty expression", Span(0, 0), input_text)

    parser = _Parser(tokens, input_text, bounds)
    schedule = parser.parse_schedule()

    if parser.peek():
        span = Span(parser.current_span().start, len(input_text))
        raise ScheduleError.trailing(span, input_text)

    return schedule
