"""Incremental construction of a :class:`BddVariableSet`."""

from typing import Iterable, List, Set, Tuple

from .variable import BddVariable, check_variable_name
from .variable_set import MAX_VARIABLES, BddVariableSet

__all__ = ["BddVariableSetBuilder"]


class BddVariableSetBuilder:
    """Collects named variables one by one and then builds a variable set.

    Every name must be unique and must not contain any of the characters
    ``! & | ^ = < > ( )``.
    """

    __slots__ = ("_names", "_known")

    def __init__(self) -> None:
        """Create a builder without any variables."""
        self._names: List[str] = []
        self._known: Set[str] = set()

    def make_variable(self, name: str) -> BddVariable:
        """Add a variable called ``name`` and return its identifier.

        Raises ValueError when the name is already used, holds a reserved
        character, or when the set would grow beyond the allowed size.
        """
        new_id = len(self._names)
        if new_id >= MAX_VARIABLES:
            raise ValueError(
                "Too many BDD variables. "
                f"There can be at most {MAX_VARIABLES} variables."
            )
        if name in self._known:
            raise ValueError(f"BDD variable {name} already exists.")
        check_variable_name(name)
        self._known.add(name)
        self._names.append(name)
        return BddVariable(new_id)

    def make_variables(self, names: Iterable[str]) -> List[BddVariable]:
        """Add several variables at once and return their identifiers in order."""
        return [self.make_variable(name) for name in names]

    def make(self, *args: str) -> Tuple[BddVariable, ...]:
        """Add the variables named by ``args`` and return them as a tuple for unpacking."""
        return tuple(self.make_variables(args))

    def build(self) -> BddVariableSet:
        """Create the variable set holding all variables added so far."""
        return BddVariableSet(self._names)

    def __len__(self) -> int:
        return len(self._names)