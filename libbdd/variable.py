"""BDD variable identifiers and variable-name validation."""

from dataclasses import dataclass

__all__ = ["BddVariable", "NOT_IN_VAR_NAME", "MAX_VARIABLE_ID", "check_variable_name"]

#: Characters that cannot appear in a variable name, since they are
#: tokens of the Boolean expression language.
NOT_IN_VAR_NAME = ("!", "&", "|", "^", "=", "<", ">", "(", ")")

#: Largest identifier a variable may carry (16-bit unsigned).
MAX_VARIABLE_ID = 0xFFFF


@dataclass(frozen=True, order=True)
class BddVariable:
    """Identifies one decision variable of a BDD by its position in the ordering."""

    index: int

    def __post_init__(self) -> None:
        if not isinstance(self.index, int) or isinstance(self.index, bool):
            raise TypeError(f"Variable index must be an int, got {self.index!r}.")
        if not 0 <= self.index <= MAX_VARIABLE_ID:
            raise ValueError(
                f"Variable index {self.index} is outside 0..{MAX_VARIABLE_ID}."
            )

    def to_index(self) -> int:
        """Return the variable as a plain integer index."""
        return self.index

    @classmethod
    def from_index(cls, index: int) -> "BddVariable":
        """Create a variable from an integer index; raises ValueError if out of range."""
        return cls(index)

    def __index__(self) -> int:
        return self.index

    def __str__(self) -> str:
        return str(self.index)


def check_variable_name(name: str) -> str:
    """Return ``name`` unchanged, or raise ValueError if it holds a reserved character."""
    if any(char in NOT_IN_VAR_NAME for char in name):
        raise ValueError(
            f"Variable name {name} is invalid. Cannot use {list(NOT_IN_VAR_NAME)}"
        )
    return name