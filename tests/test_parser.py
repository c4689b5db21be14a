import pytest

from inty.ast import (
    Binary, BinOp, Block, Bool, ExprStmt, Ident, If, Integer, Let,
    ListLit, Logical, LogOp, Relational, RelOp, Unary, UnOp,
)
from inty.errors import ExpectedTokenError, InvalidExpressionError, ParseError
from inty.lexer import tokenize
from inty.parser import parse


def parse_text(source):
    return parse(tokenize(source))


def parse_expr(source):
    statements = parse_text(source)
    assert len(statements) == 1
    assert isinstance(statements[0], ExprStmt)
    return statements[0].expr


def test_parse_integer():
    assert parse_text('1') == [ExprStmt(Integer(1))]


def test_parse_unary_operators():
    assert parse_expr('+1') == Unary(UnOp.PLUS, Integer(1))
    assert parse_expr('-1') == Unary(UnOp.MINUS, Integer(1))
    assert parse_expr('!true') == Unary(UnOp.NEGATE, Bool(True))


def test_subtraction_is_left_associative():
    assert parse_expr('a - b - c') == Binary(
        BinOp.SUB, Binary(BinOp.SUB, Ident('a'), Ident('b')), Ident('c')
    )


def test_multiplication_is_left_associative():
    assert parse_expr('2 * 3 / 4') == Binary(
        BinOp.DIV, Binary(BinOp.MUL, Integer(2), Integer(3)), Integer(4)
    )


def test_exponentiation_is_right_associative():
    assert parse_expr('2 ^ 3 ^ 4') == Binary(
        BinOp.POW, Integer(2), Binary(BinOp.POW, Integer(3), Integer(4))
    )


def test_unary_minus_applies_after_exponentiation():
    assert parse_expr('-3 ^ 2') == Unary(UnOp.MINUS, Binary(BinOp.POW, Integer(3), Integer(2)))
    assert parse_expr('2 ^ -1') == Binary(BinOp.POW, Integer(2), Unary(UnOp.MINUS, Integer(1)))


def test_complex_precedence():
    assert parse_expr('1 + 2 * 3 ^ 4') == Binary(
        BinOp.ADD,
        Integer(1),
        Binary(BinOp.MUL, Integer(2), Binary(BinOp.POW, Integer(3), Integer(4))),
    )


def test_parentheses_override_precedence():
    assert parse_expr('(1 + 2) * 3') == Binary(
        BinOp.MUL, Binary(BinOp.ADD, Integer(1), Integer(2)), Integer(3)
    )


def test_logical_and_relational_layers():
    assert parse_expr('a || b && c') == Logical(
        LogOp.OR, Ident('a'), Logical(LogOp.AND, Ident('b'), Ident('c'))
    )
    assert parse_expr('1 + 2 == 3') == Relational(
        RelOp.EQ, Binary(BinOp.ADD, Integer(1), Integer(2)), Integer(3)
    )
    assert parse_expr('!a && b') == Logical(LogOp.AND, Unary(UnOp.NEGATE, Ident('a')), Ident('b'))


def test_list_literals_skip_commas():
    assert parse_expr('[1, 2]') == ListLit((Integer(1), Integer(2)))
    assert parse_expr('[,1,,2,]') == ListLit((Integer(1), Integer(2)))
    assert parse_expr('[]') == ListLit(())
    assert parse_expr('[,]') == ListLit(())
    assert parse_expr('[[1], true]') == ListLit((ListLit((Integer(1),)), Bool(True)))


def test_list_elements_need_separating_commas():
    with pytest.raises(ExpectedTokenError) as exc:
        parse_text('[1 2]')
    assert str(exc.value) == 'expected ], found 2'


def test_let_statement():
    assert parse_text('let x = 1 + 2') == [
        Let('x', Binary(BinOp.ADD, Integer(1), Integer(2)))
    ]


def test_if_statement_branches_are_statements():
    assert parse_text('if x > 1 let y = 2 else { 3 }') == [
        If(
            Relational(RelOp.GT, Ident('x'), Integer(1)),
            Let('y', Integer(2)),
            Block((ExprStmt(Integer(3)),)),
        )
    ]


def test_else_binds_to_nearest_if():
    assert parse_text('if a if b 1 else 2') == [
        If(Ident('a'), If(Ident('b'), ExprStmt(Integer(1)), ExprStmt(Integer(2))))
    ]


def test_block_statement():
    assert parse_text('{ let x = 1; x }') == [
        Block((Let('x', Integer(1)), ExprStmt(Ident('x'))))
    ]
    assert parse_text('{ 1; }') == [Block((ExprStmt(Integer(1)),))]


def test_top_level_statements():
    assert parse_text('1; 2;') == [ExprStmt(Integer(1)), ExprStmt(Integer(2))]
    assert parse([]) == []


def test_empty_block_is_a_syntax_error():
    with pytest.raises(ParseError):
        parse_text('{ }')


def test_tokens_remaining_after_parsing():
    with pytest.raises(InvalidExpressionError) as exc:
        parse_text('1 2')
    assert str(exc.value) == 'invalid expression: tokens remaining after parsing'


def test_expected_token_errors():
    with pytest.raises(ExpectedTokenError) as exc:
        parse_text('(1 + 2]')
    assert str(exc.value) == 'expected ), found ]'
    with pytest.raises(ExpectedTokenError) as exc:
        parse_text('let x 1')
    assert str(exc.value) == 'expected =, found 1'
    with pytest.raises(ExpectedTokenError) as exc:
        parse_text('{ 1 2 }')
    assert str(exc.value) == 'expected }, found 2'


def test_running_out_of_tokens_names_the_last_token():
    with pytest.raises(ParseError) as exc:
        parse_text('(1 + 2')
    assert str(exc.value) == "syntax error: unexpected end of input after '2'"


@pytest.mark.parametrize('source', [']', '+', '1 +', 'let', 'if true', ';', ')'])
def test_malformed_input_is_a_syntax_error(source):
    with pytest.raises(ParseError):
        parse_text(source)


def test_stray_bracket_message():
    with pytest.raises(ParseError) as exc:
        parse_text(']')
    assert str(exc.value) == 'syntax error: unexpected token ]'
    assert exc.value.token is not None
