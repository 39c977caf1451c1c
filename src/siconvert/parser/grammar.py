"""Recursive-descent parser turning tokens into an expression tree.

Grammar::

    expression := term
    term       := factor ( ('+' | '-') factor )*
    factor     := quantity ( ('*' | '/') quantity )*
    quantity   := primary unit_pow*
    primary    := INTEGER | FLOAT | '(' expression ')' | unit_pow
    unit_pow   := UNIT_NAME [ INTEGER ]
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from ..errors import ParseError
from ..lexer import AddOp, CloseParen, FactOp, Float, Integer, OpenParen, Token, UnitString
from .ast import Binary, Expression, PrimaryFloat, PrimaryInt, Quantity, Unit, UnitPow

logger = logging.getLogger(__name__)


class _TokenStream:
    """Token cursor; tokens are stored reversed so ``pop`` consumes left to right."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._stack: List[Token] = list(reversed(tokens))

    def peek(self) -> Token | None:
        if not self._stack:
            return None
        return self._stack[-1]

    def pop(self) -> Token | None:
        if not self._stack:
            return None
        return self._stack.pop()

    def push_back(self, token: Token) -> None:
        self._stack.append(token)

    def remaining(self) -> int:
        return len(self._stack)


def parse(tokens: Sequence[Token]) -> Expression:
    """Parse ``tokens`` into a single expression tree.

    Every token must be consumed; leftovers raise :class:`ParseError`.
    """

    stream = _TokenStream(tokens)
    if stream.peek() is None:
        raise ParseError("empty expression")

    expression = _parse_expression(stream)
    if stream.remaining():
        leftover = stream.peek()
        raise ParseError(
            f"parser did not consume all tokens: unexpected {str(leftover)!r} "
            f"({stream.remaining()} token(s) left)"
        )
    logger.debug("parsed %d tokens into %r", len(tokens), expression)
    return expression


def _parse_expression(stream: _TokenStream) -> Expression:
    return _parse_term(stream)


def _parse_term(stream: _TokenStream) -> Expression:
    result = _parse_factor(stream)
    while True:
        token = stream.pop()
        if isinstance(token, AddOp):
            result = Binary(result, token.op, _parse_factor(stream))
            continue
        if token is not None:
            stream.push_back(token)
        return result


def _parse_factor(stream: _TokenStream) -> Expression:
    result = _parse_quantity(stream)
    while True:
        token = stream.pop()
        if isinstance(token, FactOp):
            result = Binary(result, token.op, _parse_quantity(stream))
            continue
        if token is not None:
            stream.push_back(token)
        return result


def _parse_quantity(stream: _TokenStream) -> Expression:
    result = _parse_primary(stream)
    while isinstance(stream.peek(), UnitString):
        result = Quantity(result, _parse_unit_pow(stream))
    return result


def _parse_primary(stream: _TokenStream) -> Expression:
    token = stream.pop()
    if token is None:
        raise ParseError("unexpected end of expression")
    if isinstance(token, Integer):
        return PrimaryInt(token.value)
    if isinstance(token, Float):
        return PrimaryFloat(token.value)
    if isinstance(token, OpenParen):
        inner = _parse_expression(stream)
        closing = stream.pop()
        if not isinstance(closing, CloseParen):
            found = "end of expression" if closing is None else repr(str(closing))
            raise ParseError(f"expected ')' but found {found}")
        return inner
    if isinstance(token, UnitString):
        stream.push_back(token)
        return _parse_unit_pow(stream)
    raise ParseError(f"unexpected token {str(token)!r}")


def _parse_unit_pow(stream: _TokenStream) -> Expression:
    token = stream.pop()
    if not isinstance(token, UnitString):
        raise ParseError("expected a unit name")
    power = stream.pop()
    if isinstance(power, Integer):
        return UnitPow(token.name, power.value)
    if power is not None:
        stream.push_back(power)
    return Unit(token.name)


__all__ = ["parse"]
