"""Total valuations of BDD variables and iteration over the valuations of a clause.

A *clause* here is a partial assignment of variables. It is given either as a
mapping from :class:`BddVariable` (or integer index) to ``bool`` or as an
iterable of ``(variable, value)`` pairs. When pairs repeat a variable, the last
value wins.
"""

import operator
from functools import total_ordering
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from .variable import MAX_VARIABLE_ID, BddVariable

__all__ = ["BddValuation", "ValuationsOfClauseIterator", "Clause"]

Clause = Union[Mapping[BddVariable, bool], Iterable[Tuple[BddVariable, bool]]]


def _normalize_clause(clause: Clause) -> Dict[int, bool]:
    """Turn a clause into a dictionary from variable index to value."""
    pairs = clause.items() if isinstance(clause, Mapping) else clause
    return {operator.index(variable): bool(value) for variable, value in pairs}


def _check_count(num_vars: int) -> int:
    if not 0 <= num_vars <= MAX_VARIABLE_ID:
        raise ValueError(f"Variable count {num_vars} is outside 0..{MAX_VARIABLE_ID}.")
    return num_vars


@total_ordering
class BddValuation:
    """One assignment of a Boolean value to every variable of a BDD.

    Valuations compare lexicographically by their values, with ``False``
    before ``True``. They are mutable; do not change one while it is a key
    in a set or dictionary.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[bool]) -> None:
        """Create a valuation from the values of variables ``0, 1, ...``."""
        self._values: List[bool] = [bool(value) for value in values]
        _check_count(len(self._values))

    @classmethod
    def all_false(cls, num_vars: int) -> "BddValuation":
        """Create a valuation with every variable set to ``False``."""
        return cls([False] * _check_count(num_vars))

    @classmethod
    def all_true(cls, num_vars: int) -> "BddValuation":
        """Create a valuation with every variable set to ``True``."""
        return cls([True] * _check_count(num_vars))

    @classmethod
    def from_clause(cls, clause: Clause, num_vars: int) -> "BddValuation":
        """Convert a clause that fixes all ``num_vars`` variables into a valuation.

        Raises ValueError if some variable is left unfixed or if the clause
        names a variable outside the valuation.
        """
        fixed = _normalize_clause(clause)
        _check_count(num_vars)
        outside = [index for index in fixed if index >= num_vars]
        if outside:
            raise ValueError(
                f"Clause fixes variable {min(outside)} outside of {num_vars} variables."
            )
        missing = [index for index in range(num_vars) if index not in fixed]
        if missing:
            raise ValueError(f"Clause does not fix variable {missing[0]}.")
        return cls(fixed[index] for index in range(num_vars))

    def flip_value(self, variable: BddVariable) -> None:
        """Negate the value of ``variable``."""
        index = operator.index(variable)
        self._values[index] = not self._values[index]

    def clear(self, variable: BddVariable) -> None:
        """Set ``variable`` to ``False``."""
        self._values[operator.index(variable)] = False

    def set(self, variable: BddVariable) -> None:
        """Set ``variable`` to ``True``."""
        self._values[operator.index(variable)] = True

    def set_value(self, variable: BddVariable, value: bool) -> None:
        """Set ``variable`` to ``value``."""
        self._values[operator.index(variable)] = bool(value)

    def vector(self) -> List[bool]:
        """Return the values as a new list."""
        return list(self._values)

    def to_values(self) -> List[Tuple[BddVariable, bool]]:
        """Return ``(variable, value)`` pairs for every variable, in order."""
        return [(BddVariable(index), value) for index, value in enumerate(self._values)]

    def value(self, variable: BddVariable) -> bool:
        """Return the value of ``variable``."""
        return self._values[operator.index(variable)]

    def num_vars(self) -> int:
        """Return the number of variables in this valuation."""
        return len(self._values)

    def extends(self, clause: Clause) -> bool:
        """Return True if this valuation agrees with every value fixed in ``clause``.

        Variables of the clause beyond this valuation are not considered.
        """
        fixed = _normalize_clause(clause)
        return all(
            fixed.get(index, value) == value for index, value in enumerate(self._values)
        )

    def _successor(self, fixed: Dict[int, bool]) -> Optional["BddValuation"]:
        """Increment the free variables as a little-endian bit vector.

        Returns None when the increment overflows. Raises ValueError if this
        valuation disagrees with a value fixed in ``fixed``.
        """
        result = BddValuation(self._values)
        carry = True
        for index, current in enumerate(self._values):
            if index in fixed:
                if fixed[index] != current:
                    raise ValueError(
                        f"Valuation disagrees with the clause on variable {index}."
                    )
                continue
            result._values[index] = current ^ carry
            carry = current and carry
            if not carry:
                break
        return None if carry else result

    def __getitem__(self, variable: BddVariable) -> bool:
        return self.value(variable)

    def __setitem__(self, variable: BddVariable, value: bool) -> None:
        self.set_value(variable, value)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[bool]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BddValuation):
            return NotImplemented
        return self._values == other._values

    def __lt__(self, other: "BddValuation") -> bool:
        if not isinstance(other, BddValuation):
            return NotImplemented
        return self._values < other._values

    def __hash__(self) -> int:
        return hash(tuple(self._values))

    def __str__(self) -> str:
        return "[" + ",".join("1" if value else "0" for value in self._values) + "]"

    def __repr__(self) -> str:
        return f"BddValuation({self._values!r})"


class ValuationsOfClauseIterator:
    """Iterates over every valuation of ``num_vars`` variables that satisfies a clause.

    The number of such valuations can be exponential in ``num_vars``.
    """

    __slots__ = ("_next", "_clause")

    def __init__(self, clause: Clause, num_vars: int) -> None:
        """Start at the smallest valuation that matches the conjunctive ``clause``."""
        self._clause: Dict[int, bool] = _normalize_clause(clause)
        first = BddValuation.all_false(num_vars)
        for index, value in self._clause.items():
            if value:
                first.flip_value(index)
        self._next: Optional[BddValuation] = first

    @classmethod
    def empty(cls) -> "ValuationsOfClauseIterator":
        """Create an iterator that yields nothing."""
        iterator = cls({}, 0)
        iterator._next = None
        return iterator

    @classmethod
    def unconstrained(cls, num_vars: int) -> "ValuationsOfClauseIterator":
        """Create an iterator over all ``2 ** num_vars`` valuations."""
        return cls({}, num_vars)

    def __iter__(self) -> "ValuationsOfClauseIterator":
        return self

    def __next__(self) -> BddValuation:
        current = self._next
        if current is None:
            raise StopIteration
        self._next = current._successor(self._clause)
        return current