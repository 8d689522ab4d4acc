import pytest

from syntaxkit.ast import (
    Add,
    BoolLit,
    Cursor,
    Div,
    Group,
    IntLit,
    Mul,
    Neg,
    Span,
    StructLit,
    StructLitArg,
    Sub,
    Var,
)
from syntaxkit.expressions import (
    parse_bool_lit,
    parse_expr,
    parse_int_lit,
    parse_struct_lit,
    parse_struct_lit_arg,
    parse_var,
)
from syntaxkit.scanner import Scanner


def span(column, line, offset, width):
    return Span(Cursor(column, line, offset), width)


def test_parse_bool_false():
    assert parse_bool_lit(Scanner("false")) == BoolLit(False)


def test_parse_bool_true():
    assert parse_bool_lit(Scanner("true")) == BoolLit(True)


def test_parse_bool_error():
    assert parse_bool_lit(Scanner("nope")) is None


def test_parse_expr_with_vars():
    expected = Add([
        Var("a", span(0, 0, 0, 1)),
        Var("b", span(4, 0, 4, 1)),
        Var("c", span(8, 0, 8, 1)),
    ])
    assert parse_expr(Scanner("a + b + c")) == expected


def test_parse_add():
    expected = Add([IntLit("1"), IntLit("2"), IntLit("3")])
    assert parse_expr(Scanner("1 + 2 + 3")) == expected


def test_parse_div():
    expected = Div([IntLit("3"), IntLit("4"), IntLit("5")])
    assert parse_expr(Scanner("3 / 4 / 5")) == expected


def test_parse_grp_empty_fails():
    assert parse_expr(Scanner("()")) is None


def test_parse_grp():
    expected = Add([
        Group(IntLit("3")),
        Group(Sub([IntLit("4"), IntLit("5")])),
        Group(Group(Group(IntLit("6")))),
    ])
    assert parse_expr(Scanner("(3) + (4 - 5) + (((6)))")) == expected


def test_parse_mul():
    expected = Mul([IntLit("5"), IntLit("6"), IntLit("7")])
    assert parse_expr(Scanner("5 * 6 * 7")) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("-(75)", Neg(Group(IntLit("75")))),
        ("-(-75)", Neg(Group(IntLit("-75")))),
        ("-(-(75))", Neg(Group(Neg(Group(IntLit("75")))))),
    ],
)
def test_parse_neg(text, expected):
    assert parse_expr(Scanner(text)) == expected


def test_parse_sub():
    expected = Sub([IntLit("7"), IntLit("8"), IntLit("9")])
    assert parse_expr(Scanner("7 - 8 - 9")) == expected


@pytest.mark.parametrize("text, value", [("7", "7"), ("-7", "-7")])
def test_parse_int_lit_as_expr(text, value):
    assert parse_expr(Scanner(text)) == IntLit(value)


@pytest.mark.parametrize(
    "text",
    ["0", "-1", "2", "99999999999999999999999999999999999999999999999"],
)
def test_parse_int_lit(text):
    assert parse_int_lit(Scanner(text)) == IntLit(text)


def test_parse_int_error():
    assert parse_int_lit(Scanner("nah")) is None


def test_parse_struct_anonymous_empty():
    assert parse_struct_lit(Scanner("{}")) == StructLit()


def test_parse_struct_named_empty():
    assert parse_struct_lit(Scanner("Monkey {}")) == StructLit("Monkey", [])


def test_parse_struct_property_value_shorthand():
    assert parse_struct_lit(Scanner("Monkey { a , b , c }")) == StructLit(
        "Monkey",
        [StructLitArg("a"), StructLitArg("b"), StructLitArg("c")],
    )


def test_parse_struct_shorthand_trailing_comma():
    assert parse_struct_lit(Scanner("BananaWithExtraComma { a , b , }")) == StructLit(
        "BananaWithExtraComma",
        [StructLitArg("a"), StructLitArg("b")],
    )


def test_parse_struct_with_property_values():
    text = "Monkey { a : 100 , b : 5 * 7 , c : true, d : {}, e : Vec { x, y, z } }"
    expected = StructLit("Monkey", [
        StructLitArg("a", IntLit("100")),
        StructLitArg("b", Mul([IntLit("5"), IntLit("7")])),
        StructLitArg("c", BoolLit(True)),
        StructLitArg("d", StructLit(None, [])),
        StructLitArg("e", StructLit("Vec", [
            StructLitArg("x"),
            StructLitArg("y"),
            StructLitArg("z"),
        ])),
    ])
    assert parse_struct_lit(Scanner(text)) == expected


def test_parse_struct_with_property_values_trailing_comma():
    text = "BananaWithExtraComma { a : 100 , b : 5 * 7 , }"
    expected = StructLit("BananaWithExtraComma", [
        StructLitArg("a", IntLit("100")),
        StructLitArg("b", Mul([IntLit("5"), IntLit("7")])),
    ])
    assert parse_struct_lit(Scanner(text)) == expected


def test_parse_struct_lit_arg_shorthand_and_value():
    assert parse_struct_lit_arg(Scanner("x")) == StructLitArg("x", None)
    assert parse_struct_lit_arg(Scanner("x : 3")) == StructLitArg("x", IntLit("3"))
    assert parse_struct_lit_arg(Scanner("3")) is None


def test_parse_struct_unclosed_fails():
    assert parse_struct_lit(Scanner("Monkey { a ,")) is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("monkey", Var("monkey", span(0, 0, 0, 6))),
        ("monkey123", Var("monkey123", span(0, 0, 0, 9))),
        ("123syntaxerror", None),
    ],
)
def test_parse_var(text, expected):
    assert parse_var(Scanner(text)) == expected


def test_struct_literal_as_expression():
    assert parse_expr(Scanner("Vec { x }")) == StructLit("Vec", [StructLitArg("x")])


def test_precedence_sub_loosest():
    expected = Sub([IntLit("1"), Add([IntLit("2"), IntLit("3")])])
    assert parse_expr(Scanner("1 - 2 + 3")) == expected


def test_precedence_mul_tightest():
    expected = Add([IntLit("1"), Div([Mul([IntLit("2"), IntLit("3")]), IntLit("4")])])
    assert parse_expr(Scanner("1 + 2 * 3 / 4")) == expected


def test_expression_stops_before_trailing_text():
    scn = Scanner("1 + 2 rest")
    assert parse_expr(scn) == Add([IntLit("1"), IntLit("2")])
    assert scn.current_cursor().offset == 5
    assert scn.has(" rest")


def test_dangling_operator_fails():
    assert parse_expr(Scanner("1 +")) is None


def test_var_span_on_second_line():
    scn = Scanner("\nab")
    scn.skip_whitespaces()
    assert parse_var(scn) == Var("ab", span(0, 1, 1, 2))