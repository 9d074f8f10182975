"""The ordered, immutable set of named variables that BDDs are built over."""

from typing import Dict, Iterable, List, Optional, Tuple

from .variable import BddVariable, check_variable_name

__all__ = ["BddVariableSet", "MAX_VARIABLES"]

#: Largest number of variables a set may hold.
MAX_VARIABLES = 0xFFFF - 1


class BddVariableSet:
    """Maintains the names and ordering of the variables that can appear in a BDD.

    Variables are ordered by their position in the set; the first name gets
    identifier 0. Once created, the set does not change.
    """

    __slots__ = ("_names", "_index")

    def __init__(self, names: Iterable[str]) -> None:
        """Create a set from unique, valid variable names.

        Raises ValueError for duplicate names, names holding reserved
        characters, or more than the allowed number of variables.
        """
        ordered: List[str] = []
        index: Dict[str, int] = {}
        for name in names:
            if len(ordered) >= MAX_VARIABLES:
                raise ValueError(
                    "Too many BDD variables. "
                    f"There can be at most {MAX_VARIABLES} variables."
                )
            if name in index:
                raise ValueError(f"BDD variable {name} already exists.")
            check_variable_name(name)
            index[name] = len(ordered)
            ordered.append(name)
        self._names: Tuple[str, ...] = tuple(ordered)
        self._index: Dict[str, int] = index

    @classmethod
    def new_anonymous(cls, num_vars: int) -> "BddVariableSet":
        """Create a set of ``num_vars`` variables named ``x_0``, ``x_1``, ...."""
        if num_vars < 0:
            raise ValueError(f"Variable count cannot be negative, got {num_vars}.")
        if num_vars >= MAX_VARIABLES:
            raise ValueError(
                "Too many BDD variables. "
                f"There can be at most {MAX_VARIABLES} variables."
            )
        return cls(f"x_{i}" for i in range(num_vars))

    def num_vars(self) -> int:
        """Return the number of variables in this set."""
        return len(self._names)

    def var_by_name(self, name: str) -> Optional[BddVariable]:
        """Return the variable with the given name, or None if it is unknown."""
        position = self._index.get(name)
        return None if position is None else BddVariable(position)

    def variables(self) -> List[BddVariable]:
        """Return all variables of this set in their order."""
        return [BddVariable(i) for i in range(len(self._names))]

    def name_of(self, variable: BddVariable) -> str:
        """Return the name of ``variable``; raises IndexError if it is not in this set."""
        position = variable.to_index()
        if position >= len(self._names):
            raise IndexError(f"Variable {variable} is not in this set.")
        return self._names[position]

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BddVariableSet):
            return NotImplemented
        return self._names == other._names

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return f"BddVariableSet({list(self._names)!r})"