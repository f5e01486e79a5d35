from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class Span:
    start: int
    end: int


ScheduleErrorKind = Literal["syntax", "wildcard", "bounds", "trailing", "overflow"]


class ScheduleError(Exception):
    kind: ScheduleErrorKind
    span: Span | None
    input_text: str | None
    field: str | None

    def __init__(
        self,
        kind: ScheduleErrorKind,
        message: str,
        span: Span | None = None,
        input_text: str | None = None,
        field: str | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.span = span
        self.input_text = input_text
        self.field = field

    @classmethod
    def syntax(cls, message: str, span: Span, input_text: str) -> ScheduleError:
        return cls("syntax", message, span, input_text)

    @classmethod
    def wildcard(cls, field: str, span: Span | None, input_text: str | None) -> ScheduleError:
        return cls(
            "wildcard",
            f"{field}: cannot have more than one wildcard entry in schedule",
            span,
            input_text,
            field,
        )

    @classmethod
    def bounds(
        cls,
        message: str,
        field: str,
        span: Span | None = None,
        input_text: str | None = None,
    ) -> ScheduleError:
        return cls("bounds", message, span, input_text, field)

    @classmethod
    def trailing(cls, span: Span, input_text: str) -> ScheduleError:
        return cls("trailing", "unexpected input after time", span, input_text)

    @classmethod
    def overflow(cls, limit: int, span: Span, input_text: str) -> ScheduleError:
        return cls("overflow", f"number exceeds {limit}", span, input_text)

    @property
    def offset(self) -> int | None:
        """Input offset at which parsing failed, if known."""
        return self.span.start if self.span else None

    def display_rich(self) -> str:
        if self.span and self.input_text is not None:
            out = f"error: {self}\n"
            out += f"  {self.input_text}\n"
            padding = " " * (self.span.start + 2)
            underline = "^" * max(self.span.end - self.span.start, 1)
            out += padding + underline
            return out
        return f"error: {self}"
