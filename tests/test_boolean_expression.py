import pytest

from libbdd.boolean_expression import (
    And,
    BooleanExpression,
    Const,
    ExpressionError,
    Iff,
    Imp,
    Not,
    Or,
    Variable,
    Xor,
    parse_boolean_expression,
)


@pytest.mark.parametrize(
    "text",
    [
        "v_1+{14}",
        "!v_1",
        "true",
        "false",
        "(v_1 & v_2)",
        "(v_1 | v_2)",
        "(v_1 ^ v_2)",
        "(v_1 => v_2)",
        "(v_1 <=> v_2)",
    ],
)
def test_parse_basic_round_trip(text):
    assert str(parse_boolean_expression(text)) == text


def test_parse_operator_priority():
    parsed = parse_boolean_expression("!a ^ !b & !c | !d => !e <=> !f")
    assert str(parsed) == "(((((!a ^ !b) & !c) | !d) => !e) <=> !f)"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("a & b & c", "(a & (b & c))"),
        ("a | b | c", "(a | (b | c))"),
        ("a ^ b ^ c", "(a ^ (b ^ c))"),
        ("a => b => c", "(a => (b => c))"),
        ("a <=> b <=> c", "(a <=> (b <=> c))"),
    ],
)
def test_parse_operator_associativity(text, expected):
    assert str(parse_boolean_expression(text)) == expected


def test_parse_complex():
    parsed = parse_boolean_expression("a &!(!b)   => (!(t | !!a&b) <=> x^y)")
    assert str(parsed) == "((a & !!b) => (!(t | (!!a & b)) <=> (x ^ y)))"


@pytest.mark.parametrize(
    "text",
    [
        "a = b",
        "a < b",
        "a <= b",
        "a > b",
        "(a",
        "b)",
        "(a & (b)",
        "a & (b))",
        "a & & b",
        "a & c d & b",
        "",
        "a &",
        "()",
    ],
)
def test_parse_invalid(text):
    with pytest.raises(ExpressionError):
        parse_boolean_expression(text)


def test_parse_builds_expected_tree():
    parsed = parse_boolean_expression("a & !b | true")
    assert parsed == Or(And(Variable("a"), Not(Variable("b"))), Const(True))


def test_parse_all_node_kinds():
    parsed = parse_boolean_expression("(a <=> b) => (c ^ false)")
    assert parsed == Imp(
        Iff(Variable("a"), Variable("b")),
        Xor(Variable("c"), Const(False)),
    )


def test_classmethod_parse_matches_function():
    text = "x_0 & !x_1 => (x_1 ^ x_3 <=> (x_0 | x_1))"
    assert BooleanExpression.parse(text) == parse_boolean_expression(text)


def test_str_of_parsed_tree_reparses_to_same_tree():
    parsed = parse_boolean_expression("a & !(!b) => (!(t | !!a&b) <=> x^y)")
    assert parse_boolean_expression(str(parsed)) == parsed


def test_error_is_value_error():
    with pytest.raises(ValueError, match="Unexpected '\\)'"):
        parse_boolean_expression("b)")


def test_missing_closing_parenthesis_message():
    with pytest.raises(ExpressionError, match="Expected '\\)'"):
        parse_boolean_expression("(a")


def test_different_node_types_are_not_equal():
    assert And(Variable("a"), Variable("b")) != Or(Variable("a"), Variable("b"))
    assert str(Const(False)) == "false"