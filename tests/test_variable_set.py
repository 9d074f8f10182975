import pytest

from libbdd.variable import BddVariable
from libbdd.variable_set import MAX_VARIABLES, BddVariableSet


def mk_5_variable_set():
    return BddVariableSet(["v1", "v2", "v3", "v4", "v5"])


def test_anonymous_names_map_to_variables():
    universe = BddVariableSet.new_anonymous(5)
    assert universe.var_by_name("x_0") == BddVariable(0)
    assert universe.var_by_name("x_1") == BddVariable(1)
    assert universe.var_by_name("x_2") == BddVariable(2)
    assert universe.var_by_name("x_3") == BddVariable(3)
    assert universe.var_by_name("x_4") == BddVariable(4)


def test_anonymous_name_of():
    variables = BddVariableSet.new_anonymous(4)
    vars_ = variables.variables()
    assert len(vars_) == 4
    assert variables.name_of(vars_[3]) == "x_3"


def test_anonymous_empty_set():
    assert BddVariableSet.new_anonymous(0).num_vars() == 0


def test_named_set():
    variables = BddVariableSet(["v1", "v2", "v3"])
    assert variables.num_vars() == 3
    assert variables.var_by_name("v2") == BddVariable(1)
    assert variables.var_by_name("unknown") is None
    assert variables.name_of(BddVariable(2)) == "v3"


def test_variables_in_order():
    variables = mk_5_variable_set()
    assert variables.variables() == [BddVariable(i) for i in range(5)]
    assert [variables.name_of(v) for v in variables.variables()] == [
        "v1",
        "v2",
        "v3",
        "v4",
        "v5",
    ]


def test_from_generator():
    variables = BddVariableSet(name for name in ("a", "b"))
    assert variables.var_by_name("b") == BddVariable(1)


def test_duplicate_name_rejected():
    with pytest.raises(ValueError):
        BddVariableSet(["var1", "var1"])


@pytest.mark.parametrize("name", ["a^b", "a&b", "!a", "(a)", "a=>b", "a|b"])
def test_invalid_name_rejected(name):
    with pytest.raises(ValueError):
        BddVariableSet([name])


def test_name_of_unknown_variable():
    with pytest.raises(IndexError):
        mk_5_variable_set().name_of(BddVariable(6))


def test_anonymous_too_many():
    with pytest.raises(ValueError):
        BddVariableSet.new_anonymous(MAX_VARIABLES)


def test_anonymous_negative():
    with pytest.raises(ValueError):
        BddVariableSet.new_anonymous(-1)


def test_named_too_many():
    with pytest.raises(ValueError):
        BddVariableSet(f"v{i}" for i in range(MAX_VARIABLES + 1))


def test_equality_and_contains():
    assert mk_5_variable_set() == mk_5_variable_set()
    assert BddVariableSet.new_anonymous(2) == BddVariableSet(["x_0", "x_1"])
    assert "v3" in mk_5_variable_set()
    assert "v9" not in mk_5_variable_set()
    assert len(mk_5_variable_set()) == 5