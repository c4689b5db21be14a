"""Tree-walking interpreter for the Inty language.

This module ties the toolchain together: source text is tokenized by
`inty.lexer`, parsed by `inty.parser` (or the Lark grammar in
`inty.grammar`), and the resulting statements are evaluated here against
a chain of `Environment` scopes. Evaluation produces one optional value
per top-level statement; the first error raised aborts the run.
"""

from __future__ import annotations

from typing import List, Optional, TextIO

from .ast import (
    Binary, BinOp, Block, Bool, Expr, ExprStmt, Ident, If, Integer, Let,
    ListLit, Logical, LogOp, Relational, RelOp, Stmt, Unary, UnOp,
)
from .environment import Environment
from .errors import DivideByZeroError, IntyTypeError, LogicError, UnknownIdentifierError
from .lexer import tokenize
from .parser import parse
from .values import BoolVal, IntegerVal, ListVal, Value, check_int32

PARSERS = ('descent', 'lark')


def parse_source(source: str, parser: str = 'descent') -> List[Stmt]:
    """Parse source text with the requested front-end."""
    if parser == 'lark':
        from .grammar import parse_source as parse_with_grammar
        return parse_with_grammar(source)
    if parser != 'descent':
        raise ValueError(f"unknown parser {parser!r}; expected one of {PARSERS}")
    return parse(tokenize(source))


def truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def integer_pow(base: int, exponent: int) -> int:
    if base in (0, 1):
        return 1 if exponent == 0 else base
    if base == -1:
        return 1 if exponent % 2 == 0 else -1
    # |base| >= 2, so anything past 2^31 overflows
    if exponent > 31:
        raise LogicError('integer overflow')
    return check_int32(base ** exponent)


class Interpreter:
    """Core interpreter that evaluates Inty statements.

    The interpreter owns the session's root environment, so bindings made
    by one `run` are visible to the next. Debug tracing is controlled by
    `debug_level` (0 disables it): level 1 traces tokens, level 2 adds the
    parsed AST and `let` bindings, level 3 adds branch decisions and block
    scopes. Trace lines go to `debug_file` when given, otherwise stdout.
    """
    def __init__(self, debug_level: int = 0, debug_file: Optional[str] = None, parser: str = 'descent'):
        self.global_env = Environment()
        self.debug_level = debug_level
        self.parser = parser
        self.debug_fp: Optional[TextIO] = None
        if debug_level > 0 and debug_file:
            self.debug_fp = open(debug_file, 'w', encoding='utf-8')

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    def __enter__(self) -> 'Interpreter':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    # Public API
    def run_source(self, source: str) -> List[Optional[Value]]:
        """Tokenize, parse and evaluate `source` in the session environment."""
        if self.parser == 'descent':
            tokens = tokenize(source)
            if self.debug_level >= 1:
                self.debug(f"tokens: {' '.join(str(t) for t in tokens)}")
            statements = parse(tokens)
        else:
            statements = parse_source(source, self.parser)
        if self.debug_level >= 2:
            for stmt in statements:
                self.debug(f"ast: {stmt}")
        return self.run(statements)

    def run(self, statements: List[Stmt], env: Optional[Environment] = None) -> List[Optional[Value]]:
        if env is None:
            env = self.global_env
        return [self.execute(stmt, env) for stmt in statements]

    def execute(self, node: Stmt, env: Environment) -> Optional[Value]:
        if isinstance(node, ExprStmt):
            return self.evaluate(node.expr, env)
        if isinstance(node, Let):
            value = self.evaluate(node.expr, env)
            env.put(node.ident, value)
            if self.debug_level >= 2:
                self.debug(f"let {node.ident}: {value.type_name()} = {value}")
            return None
        if isinstance(node, If):
            cond = self.evaluate(node.test, env)
            truthy = cond.unwrap_bool()
            if self.debug_level >= 3:
                self.debug(f"if condition {cond} -> {str(truthy).lower()}")
            if truthy:
                return self.execute(node.branch, env)
            if node.else_branch is not None:
                return self.execute(node.else_branch, env)
            return None
        if isinstance(node, Block):
            return self.execute_block(node, env)
        raise TypeError(f"unknown statement node {node!r}")

    def execute_block(self, block: Block, env: Environment) -> Optional[Value]:
        if not block.statements:
            raise LogicError('block contained no return value')
        block_env = env.child()
        if self.debug_level >= 3:
            self.debug(f"enter block (depth {block_env.depth()})")
        result = None
        for stmt in block.statements:
            result = self.execute(stmt, block_env)
        if self.debug_level >= 3:
            self.debug(f"leave block (depth {block_env.depth()})")
        return result

    def evaluate(self, node: Expr, env: Environment) -> Value:
        if isinstance(node, Integer):
            return IntegerVal(node.value)
        if isinstance(node, Bool):
            return BoolVal(node.value)
        if isinstance(node, Ident):
            value = env.get(node.name)
            if value is None:
                raise UnknownIdentifierError(node.name)
            return value
        if isinstance(node, ListLit):
            return ListVal(tuple(self.evaluate(e, env) for e in node.elements))
        if isinstance(node, Unary):
            return self.apply_unary_op(node.operator, self.evaluate(node.operand, env))
        if isinstance(node, Binary):
            left = self.evaluate(node.lhs, env)
            right = self.evaluate(node.rhs, env)
            return self.apply_binary_op(node.operator, left, right)
        if isinstance(node, Logical):
            # both sides are always evaluated; there is no short circuit
            left = self.evaluate(node.lhs, env).unwrap_bool()
            right = self.evaluate(node.rhs, env).unwrap_bool()
            if node.operator == LogOp.AND:
                return BoolVal(left and right)
            return BoolVal(left or right)
        if isinstance(node, Relational):
            left = self.evaluate(node.lhs, env)
            right = self.evaluate(node.rhs, env)
            return self.apply_relational_op(node.operator, left, right)
        raise TypeError(f"unknown expression node {node!r}")

    def apply_unary_op(self, op: UnOp, value: Value) -> Value:
        if op == UnOp.PLUS:
            return value
        if op == UnOp.MINUS:
            return IntegerVal(check_int32(-value.unwrap_integer()))
        return BoolVal(not value.unwrap_bool())

    def apply_binary_op(self, op: BinOp, a: Value, b: Value) -> Value:
        if not (isinstance(a, IntegerVal) and isinstance(b, IntegerVal)):
            raise IntyTypeError(
                f'unsupported {op.value} for {a.type_name()} and {b.type_name()}'
            )
        x, y = a.value, b.value
        if op == BinOp.ADD:
            return IntegerVal(check_int32(x + y))
        if op == BinOp.SUB:
            return IntegerVal(check_int32(x - y))
        if op == BinOp.MUL:
            return IntegerVal(check_int32(x * y))
        if op == BinOp.DIV:
            if y == 0:
                raise DivideByZeroError()
            return IntegerVal(check_int32(truncating_div(x, y)))
        if y < 0:
            raise LogicError('power must be a non-negative integer')
        return IntegerVal(integer_pow(x, y))

    def apply_relational_op(self, op: RelOp, a: Value, b: Value) -> Value:
        if type(a) is not type(b):
            raise IntyTypeError(f'cannot compare {a.type_name()} with {b.type_name()}')
        if op == RelOp.EQ:
            return BoolVal(a == b)
        if op == RelOp.NE:
            return BoolVal(a != b)
        if not isinstance(a, IntegerVal):
            raise IntyTypeError(f'{op.value} is not supported for {a.type_name()}')
        x, y = a.value, b.value
        if op == RelOp.GT:
            return BoolVal(x > y)
        if op == RelOp.LT:
            return BoolVal(x < y)
        if op == RelOp.GTE:
            return BoolVal(x >= y)
        return BoolVal(x <= y)


def evaluate(statements: List[Stmt], env: Environment) -> List[Optional[Value]]:
    """Evaluate `statements` in order against `env`, one optional result each."""
    return Interpreter().run(statements, env)


def run_program(source: str, debug_level: int = 0, parser: str = 'descent') -> List[Optional[Value]]:
    """Convenience function to parse and evaluate an Inty program from a source string."""
    with Interpreter(debug_level=debug_level, parser=parser) as interpreter:
        return interpreter.run_source(source)
