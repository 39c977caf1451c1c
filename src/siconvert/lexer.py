"""Tokenizer for unit-suffixed arithmetic expressions."""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass, field
from typing import List, Union

from .errors import LexError

logger = logging.getLogger(__name__)

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)


@dataclass(frozen=True)
class UnitString:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Integer:
    value: int
    text: str = field(default="", compare=False, repr=False)

    def __str__(self) -> str:
        return self.text or str(self.value)


@dataclass(frozen=True)
class Float:
    value: float
    text: str = field(default="", compare=False, repr=False)

    def __str__(self) -> str:
        return self.text or repr(self.value)


@dataclass(frozen=True)
class AddOp:
    op: str

    def __str__(self) -> str:
        return self.op


@dataclass(frozen=True)
class FactOp:
    op: str

    def __str__(self) -> str:
        return self.op


@dataclass(frozen=True)
class OpenParen:
    def __str__(self) -> str:
        return "("


@dataclass(frozen=True)
class CloseParen:
    def __str__(self) -> str:
        return ")"


Token = Union[UnitString, Integer, Float, AddOp, FactOp, OpenParen, CloseParen]


# -- In-progress tokens --------------------------------------------------------
# Only names and numbers span several characters; they accumulate here until a
# character that does not continue them arrives.


@dataclass
class _UnitInProgress:
    name: str

    def accepts(self, char: str) -> bool:
        return char in _LETTERS

    def absorb(self, char: str) -> "_Pending":
        self.name += char
        return self

    def finish(self) -> Token:
        return UnitString(self.name)


@dataclass
class _IntegerInProgress:
    value: int
    text: str

    def accepts(self, char: str) -> bool:
        return char in _DIGITS or char == "."

    def absorb(self, char: str) -> "_Pending":
        if char == ".":
            return _FloatInProgress(float(self.value), depth=1, text=self.text + char)
        self.value = self.value * 10 + int(char)
        self.text += char
        return self

    def finish(self) -> Token:
        return Integer(self.value, self.text)


@dataclass
class _FloatInProgress:
    """Float accumulator; each fractional digit adds ``digit * 10**-depth``."""

    value: float
    depth: int = 1
    text: str = ""

    def accepts(self, char: str) -> bool:
        return char in _DIGITS

    def absorb(self, char: str) -> "_Pending":
        self.value += int(char) * (1.0 / 10**self.depth)
        self.depth += 1
        self.text += char
        return self

    def finish(self) -> Token:
        return Float(self.value, self.text)


_Pending = Union[_UnitInProgress, _IntegerInProgress, _FloatInProgress]


def _start_token(char: str, text: str, position: int) -> Union[Token, _Pending]:
    if char in _LETTERS:
        return _UnitInProgress(char)
    if char in _DIGITS:
        return _IntegerInProgress(int(char), char)
    if char in "+-":
        return AddOp(char)
    if char in "*/":
        return FactOp(char)
    if char == "(":
        return OpenParen()
    if char == ")":
        return CloseParen()
    raise LexError(f"Unexpected character {char!r}", text, position)


def lex(text: str) -> List[Token]:
    """Split ``text`` into a flat list of tokens.

    Whitespace is skipped without closing the open token, so ``"1 2"`` lexes
    to ``Integer(12)`` and ``"k m"`` to ``UnitString("km")``.

    Raises
    ------
    LexError
        If a character can neither continue the open token nor start a new one.
    """

    tokens: List[Token] = []
    pending: _Pending | None = None

    for position, char in enumerate(text):
        if char.isspace():
            continue

        if pending is not None:
            if pending.accepts(char):
                pending = pending.absorb(char)
                continue
            tokens.append(pending.finish())
            pending = None

        started = _start_token(char, text, position)
        if isinstance(started, (_UnitInProgress, _IntegerInProgress)):
            pending = started
        else:
            tokens.append(started)

    if pending is not None:
        tokens.append(pending.finish())

    logger.debug("lexed %r into %d tokens", text, len(tokens))
    return tokens


def join_tokens(tokens: List[Token], sep: str = " ") -> str:
    """Rebuild source text from ``tokens`` using each token's original spelling."""

    return sep.join(str(token) for token in tokens)


__all__ = [
    "AddOp",
    "CloseParen",
    "FactOp",
    "Float",
    "Integer",
    "OpenParen",
    "Token",
    "UnitString",
    "join_tokens",
    "lex",
]
