from __future__ import annotations

from dataclasses import dataclass

from ._error import ScheduleError, Span

# Largest value a digit run may hold (signed 32-bit).
MAX_NUMBER = 2**31 - 1

# --- Token kinds ---


@dataclass(frozen=True, slots=True)
class TNumber:
    value: int


@dataclass(frozen=True, slots=True)
class TStar:
    pass


@dataclass(frozen=True, slots=True)
class TDash:
    pass


@dataclass(frozen=True, slots=True)
class TSlash:
    pass


@dataclass(frozen=True, slots=True)
class TComma:
    pass


@dataclass(frozen=True, slots=True)
class TDot:
    pass


@dataclass(frozen=True, slots=True)
class TColon:
    pass


@dataclass(frozen=True, slots=True)
class TSpace:
    pass


@dataclass(frozen=True, slots=True)
class TOther:
    text: str


TokenKind = TNumber | TStar | TDash | TSlash | TComma | TDot | TColon | TSpace | TOther


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    span: Span


_PUNCTUATION: dict[str, TokenKind] = {
    "*": TStar(),
    "-": TDash(),
    "/": TSlash(),
    ",": TComma(),
    ".": TDot(),
    ":": TColon(),
    " ": TSpace(),
}


class _Lexer:
    def __init__(self, input_text: str) -> None:
        self._input = input_text
        self._pos = 0

    def tokenize(self) -> list[Token]:
        tokens: list[Token] = []
        while self._pos < len(self._input):
            start = self._pos
            ch = self._input[self._pos]

            kind = _PUNCTUATION.get(ch)
            if kind is not None:
                self._pos += 1
                tokens.append(Token(kind, Span(start, self._pos)))
                continue

            if _is_digit(ch):
                tokens.append(self._lex_number())
                continue

            tokens.append(self._lex_other())

        return tokens

    def _lex_number(self) -> Token:
        start = self._pos
        while self._pos < len(self._input) and _is_digit(self._input[self._pos]):
            self._pos += 1
        digits = self._input[start : self._pos]
        span = Span(start, self._pos)
        # Leading zeros are dropped before int(), which refuses very long digit strings.
        significant = digits.lstrip("0")
        if len(significant) > len(str(MAX_NUMBER)) or int(significant or "0") > MAX_NUMBER:
            raise ScheduleError.overflow(MAX_NUMBER, span, self._input)
        return Token(TNumber(int(significant or "0")), span)

    def _lex_other(self) -> Token:
        # Anything outside the schedule alphabet, kept whole so it can be reported.
        start = self._pos
        while (
            self._pos < len(self._input)
            and self._input[self._pos] not in _PUNCTUATION
            and not _is_digit(self._input[self._pos])
        ):
            self._pos += 1
        return Token(TOther(self._input[start : self._pos]), Span(start, self._pos))


def _is_digit(ch: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits
    return "0" <= ch <= "9"


def tokenize(input_text: str) -> list[Token]:
    return _Lexer(input_text).tokenize()
