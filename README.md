# libbdd

Building blocks for working with binary decision diagrams. The package provides
named Boolean variables and ordered variable sets, a small Boolean expression
language with a parser, and total valuations of variables together with an
iterator over the valuations that match a partial clause.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Variables

`libbdd.variable.BddVariable` identifies one variable by its position in the
order. The index must be an integer from 0 to 65535:

```python
from libbdd.variable import BddVariable, check_variable_name

v = BddVariable.from_index(2)
assert v.to_index() == 2
assert str(v) == "2"

check_variable_name("a^b")  # raises ValueError
```

Variable names must not contain any of `! & | ^ = < > ( )`.

## Variable sets

A `BddVariableSet` fixes the variables and their order. You can create one from
a list of names, or use anonymous variables named `x_0`, `x_1`, and so on:

```python
from libbdd.variable_set import BddVariableSet

variables = BddVariableSet(["a", "b", "c"])
assert variables.num_vars() == 3
assert variables.var_by_name("missing") is None

anonymous = BddVariableSet.new_anonymous(4)
vars_ = anonymous.variables()
assert anonymous.name_of(vars_[3]) == "x_3"
```

Duplicate names, names that are not valid, and sets with too many variables
raise `ValueError`. `name_of` raises `IndexError` when a variable is not in the
set.

A `BddVariableSetBuilder` checks names as they are added:

```python
from libbdd.builder import BddVariableSetBuilder

builder = BddVariableSetBuilder()
v1 = builder.make_variable("v1")
v2, v3 = builder.make("v2", "v3")
variables = builder.build()
assert variables.var_by_name("v2") == v2
```

`make_variables` takes any iterable of names and returns a list.

## Boolean expressions

`parse_boolean_expression` (or `BooleanExpression.parse`) reads a formula into a
tree of `Const`, `Variable`, `Not`, `And`, `Or`, `Xor`, `Imp` and `Iff` nodes.
From the weakest to the strongest, the operators bind in this order: `<=>`,
`=>`, `|`, `&`, `^`, `!`. Every binary operator groups to the right. The names
`true` and `false` are constants:

```python
from libbdd.boolean_expression import parse_boolean_expression

expr = parse_boolean_expression("!a ^ !b & !c | !d => !e <=> !f")
assert str(expr) == "(((((!a ^ !b) & !c) | !d) => !e) <=> !f)"
```

Input that is not valid raises `ExpressionError`, a subclass of `ValueError`.

## Valuations

A `BddValuation` assigns a value to every variable. A clause is a partial
assignment, given as a mapping from variables to values or as a list of
`(variable, value)` pairs. A `ValuationsOfClauseIterator` yields every valuation
that agrees with a clause:

```python
from libbdd.valuation import BddValuation, ValuationsOfClauseIterator
from libbdd.variable import BddVariable

valuation = BddValuation([False, True, True, False])
assert str(valuation) == "[0,1,1,0]"
assert valuation.extends({BddVariable(1): True})

assert sum(1 for _ in ValuationsOfClauseIterator.unconstrained(3)) == 8

clause = {BddVariable(0): True, BddVariable(2): False}
assert sum(1 for _ in ValuationsOfClauseIterator(clause, 4)) == 4

full = BddValuation.from_clause(
    [(BddVariable(0), True), (BddVariable(1), False)], 2
)
assert full.vector() == [True, False]
```

Valuations compare in lexicographic order of their values, with `False` before
`True`, and can be indexed by a `BddVariable`.

## What this package does not do

There is no decision diagram type here. The package does not build, combine,
evaluate, quantify or serialise diagrams, and it does not turn an expression
or a clause into a diagram. It has no partial operator functions and no command
line tool. It gives you the variables, expressions and valuations that such
work is built on.