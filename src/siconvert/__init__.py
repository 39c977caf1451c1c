"""siconvert - arithmetic over SI-suffixed physical quantities."""

from .calculator import calculate, calculate_formatted
from .errors import (
    ConvertError,
    DimensionMismatchError,
    EvaluateError,
    LexError,
    ParseError,
    UnitError,
)
from .evaluator import evaluate
from .formatting import format_quantity
from .lexer import lex
from .parser import parse
from .units import DEFAULT_REGISTRY, Dimension, Quantity, resolve
from .version import __version__

__all__ = [
    "ConvertError",
    "DEFAULT_REGISTRY",
    "Dimension",
    "DimensionMismatchError",
    "EvaluateError",
    "LexError",
    "ParseError",
    "Quantity",
    "UnitError",
    "__version__",
    "calculate",
    "calculate_formatted",
    "evaluate",
    "format_quantity",
    "lex",
    "parse",
    "resolve",
]
