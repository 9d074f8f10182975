"""Explicit Boolean expression trees and their parser.

Operators, from the loosest to the tightest binding: ``<=>``, ``=>``,
``|``, ``&``, ``^`` and the prefix ``!``. Binary operators associate to
the right. ``true`` and ``false`` denote constants; any other run of
characters that are neither whitespace nor operator symbols is a variable.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, List, Sequence, Tuple, Type, Union

from .variable import NOT_IN_VAR_NAME

__all__ = [
    "ExpressionError",
    "BooleanExpression",
    "Const",
    "Variable",
    "Not",
    "And",
    "Or",
    "Xor",
    "Imp",
    "Iff",
    "parse_boolean_expression",
]


class ExpressionError(ValueError):
    """Raised when a Boolean expression cannot be parsed."""


class BooleanExpression:
    """Base of all Boolean expression tree nodes."""

    __slots__ = ()

    @classmethod
    def parse(cls, text: str) -> "BooleanExpression":
        """Parse ``text`` into an expression tree; raises ExpressionError if invalid."""
        return parse_boolean_expression(text)


@dataclass(frozen=True)
class Const(BooleanExpression):
    """A constant ``true`` or ``false``."""

    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Variable(BooleanExpression):
    """A reference to a variable by name."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Not(BooleanExpression):
    """Negation of an expression."""

    inner: BooleanExpression

    def __str__(self) -> str:
        return f"!{self.inner}"


@dataclass(frozen=True)
class _Binary(BooleanExpression):
    left: BooleanExpression
    right: BooleanExpression

    symbol: ClassVar[str] = ""

    def __str__(self) -> str:
        return f"({self.left} {self.symbol} {self.right})"


@dataclass(frozen=True)
class And(_Binary):
    """Conjunction ``left & right``."""

    symbol: ClassVar[str] = "&"


@dataclass(frozen=True)
class Or(_Binary):
    """Disjunction ``left | right``."""

    symbol: ClassVar[str] = "|"


@dataclass(frozen=True)
class Xor(_Binary):
    """Exclusive or ``left ^ right``."""

    symbol: ClassVar[str] = "^"


@dataclass(frozen=True)
class Imp(_Binary):
    """Implication ``left => right``."""

    symbol: ClassVar[str] = "=>"


@dataclass(frozen=True)
class Iff(_Binary):
    """Equivalence ``left <=> right``."""

    symbol: ClassVar[str] = "<=>"


class _Op(Enum):
    NOT = "!"
    AND = "&"
    OR = "|"
    XOR = "^"
    IMP = "=>"
    IFF = "<=>"


@dataclass(frozen=True)
class _Id:
    name: str


@dataclass(frozen=True)
class _Group:
    tokens: Tuple["_Token", ...]


_Token = Union[_Op, _Id, _Group]

_SINGLE_CHAR_OPS = {"!": _Op.NOT, "&": _Op.AND, "|": _Op.OR, "^": _Op.XOR}

# Loosest binding first; each operator splits at its first occurrence.
_PRECEDENCE: Tuple[Tuple[_Op, Type[_Binary]], ...] = (
    (_Op.IFF, Iff),
    (_Op.IMP, Imp),
    (_Op.OR, Or),
    (_Op.AND, And),
    (_Op.XOR, Xor),
)


class _Tokenizer:
    """Turns expression text into a tree of tokens grouped by parentheses."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _next_char(self) -> Union[str, None]:
        if self._pos >= len(self._text):
            return None
        char = self._text[self._pos]
        self._pos += 1
        return char

    def _peek_char(self) -> Union[str, None]:
        return self._text[self._pos] if self._pos < len(self._text) else None

    def tokenize(self, top_level: bool = True) -> Tuple[_Token, ...]:
        output: List[_Token] = []
        while (char := self._next_char()) is not None:
            if char.isspace():
                continue
            if char in _SINGLE_CHAR_OPS:
                output.append(_SINGLE_CHAR_OPS[char])
            elif char == "=":
                if self._next_char() != ">":
                    raise ExpressionError("Expected '>' after '='.")
                output.append(_Op.IMP)
            elif char == "<":
                if self._next_char() != "=":
                    raise ExpressionError("Expected '=' after '<'.")
                if self._next_char() != ">":
                    raise ExpressionError("Expected '>' after '='.")
                output.append(_Op.IFF)
            elif char == ">":
                raise ExpressionError("Unexpected '>'.")
            elif char == ")":
                if top_level:
                    raise ExpressionError("Unexpected ')'.")
                return tuple(output)
            elif char == "(":
                output.append(_Group(self.tokenize(top_level=False)))
            else:
                output.append(_Id(self._read_name(char)))
        if not top_level:
            raise ExpressionError("Expected ')'.")
        return tuple(output)

    def _read_name(self, first: str) -> str:
        chars = [first]
        while (char := self._peek_char()) is not None:
            if char.isspace() or char in NOT_IN_VAR_NAME:
                break
            chars.append(char)
            self._pos += 1
        return "".join(chars)


def _describe(tokens: Sequence[_Token]) -> str:
    def show(token: _Token) -> str:
        if isinstance(token, _Op):
            return token.value
        if isinstance(token, _Id):
            return token.name
        return "(" + " ".join(show(inner) for inner in token.tokens) + ")"

    return "[" + ", ".join(show(token) for token in tokens) + "]"


def _parse_level(tokens: Sequence[_Token], level: int) -> BooleanExpression:
    if level == len(_PRECEDENCE):
        return _parse_terminal(tokens)
    op, node_type = _PRECEDENCE[level]
    try:
        split = tokens.index(op)
    except ValueError:
        return _parse_level(tokens, level + 1)
    return node_type(
        _parse_level(tokens[:split], level + 1),
        _parse_level(tokens[split + 1 :], level),
    )


def _parse_terminal(tokens: Sequence[_Token]) -> BooleanExpression:
    if not tokens:
        raise ExpressionError("Expected formula, found nothing :(")
    head = tokens[0]
    if head is _Op.NOT:
        return Not(_parse_terminal(tokens[1:]))
    if len(tokens) > 1:
        raise ExpressionError(
            f"Expected variable name or (...), but found {_describe(tokens)}."
        )
    if isinstance(head, _Id):
        if head.name == "true":
            return Const(True)
        if head.name == "false":
            return Const(False)
        return Variable(head.name)
    if isinstance(head, _Group):
        return _parse_level(head.tokens, 0)
    raise ExpressionError(f"Unexpected operator '{head.value}'.")


def parse_boolean_expression(text: str) -> BooleanExpression:
    """Parse ``text`` into a :class:`BooleanExpression`; raises ExpressionError if invalid."""
    tokens = _Tokenizer(text).tokenize()
    return _parse_level(tokens, 0)