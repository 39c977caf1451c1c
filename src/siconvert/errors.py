"""Error taxonomy shared by every stage of the evaluation pipeline."""

from __future__ import annotations

from typing import Any


class ConvertError(ValueError):
    """Base class for failures raised while evaluating an expression.

    When ``position`` is known the rendered message carries the source text
    and a caret under the offending character.
    """

    stage = "convert"

    def __init__(self, message: str, text: str | None = None, position: int | None = None) -> None:
        pointer = ""
        if text is not None and position is not None and 0 <= position <= len(text):
            pointer = f"\n{text}\n{' ' * position}^"
        super().__init__(f"{message}{pointer}")
        self.message = message
        self.text = text
        self.position = position


class LexError(ConvertError):
    """Raised when a character cannot start or continue a token."""

    stage = "lex"


class ParseError(ConvertError):
    """Raised when the token sequence does not match the grammar."""

    stage = "parse"


class UnitError(ConvertError):
    """Raised when a unit name is not present in the registry."""

    stage = "unit"

    def __init__(self, message: str, symbol: str | None = None) -> None:
        super().__init__(message)
        self.symbol = symbol


class EvaluateError(ConvertError):
    """Raised when an expression tree cannot be evaluated."""

    stage = "evaluate"


class DimensionMismatchError(EvaluateError):
    """Raised when adding quantities whose dimension vectors differ."""

    def __init__(self, left: Any, right: Any) -> None:
        super().__init__(f"cannot add {left} and {right}: dimensions differ")
        self.left = left
        self.right = right


__all__ = [
    "ConvertError",
    "LexError",
    "ParseError",
    "UnitError",
    "EvaluateError",
    "DimensionMismatchError",
]
