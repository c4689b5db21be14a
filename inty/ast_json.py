"""JSON serialization/deserialization for the Inty AST.

This module converts between Inty AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. It supports a full
round-trip for all statement and expression nodes and their operators.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .ast import (
    Binary,
    BinOp,
    Block,
    Bool,
    ExprStmt,
    Ident,
    If,
    Integer,
    Let,
    ListLit,
    Logical,
    LogOp,
    Relational,
    RelOp,
    Stmt,
    Unary,
    UnOp,
)
from .errors import LexError
from .values import INT_MAX, INT_MIN

OPERATOR_NODES = {
    'Binary': (Binary, BinOp),
    'Logical': (Logical, LogOp),
    'Relational': (Relational, RelOp),
}


def ast_to_obj(node: Any) -> Any:
    if node is None:
        return None
    if isinstance(node, list):
        return [ast_to_obj(n) for n in node]

    # Statements
    if isinstance(node, ExprStmt):
        return {"type": "ExprStmt", "expr": ast_to_obj(node.expr)}
    if isinstance(node, Let):
        return {"type": "Let", "ident": node.ident, "expr": ast_to_obj(node.expr)}
    if isinstance(node, If):
        return {
            "type": "If",
            "test": ast_to_obj(node.test),
            "branch": ast_to_obj(node.branch),
            "else_branch": ast_to_obj(node.else_branch),
        }
    if isinstance(node, Block):
        return {"type": "Block", "statements": [ast_to_obj(s) for s in node.statements]}

    # Expressions
    if isinstance(node, Integer):
        return {"type": "Integer", "value": node.value}
    if isinstance(node, Bool):
        return {"type": "Bool", "value": node.value}
    if isinstance(node, Ident):
        return {"type": "Ident", "name": node.name}
    if isinstance(node, ListLit):
        return {"type": "ListLit", "elements": [ast_to_obj(e) for e in node.elements]}
    if isinstance(node, Unary):
        return {"type": "Unary", "operator": node.operator.value, "operand": ast_to_obj(node.operand)}
    if isinstance(node, (Binary, Logical, Relational)):
        return {
            "type": type(node).__name__,
            "operator": node.operator.value,
            "lhs": ast_to_obj(node.lhs),
            "rhs": ast_to_obj(node.rhs),
        }

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if obj is None:
        return None
    if isinstance(obj, list):
        return [ast_from_obj(x) for x in obj]
    if not isinstance(obj, dict) or "type" not in obj:
        raise ValueError(f"Invalid AST object: {obj!r}")

    t = obj["type"]
    if t == "ExprStmt":
        return ExprStmt(ast_from_obj(obj["expr"]))
    if t == "Let":
        return Let(obj["ident"], ast_from_obj(obj["expr"]))
    if t == "If":
        return If(ast_from_obj(obj["test"]), ast_from_obj(obj["branch"]), ast_from_obj(obj.get("else_branch")))
    if t == "Block":
        return Block(tuple(ast_from_obj(s) for s in obj["statements"]))
    if t == "Integer":
        value = int(obj["value"])
        if value < INT_MIN or value > INT_MAX:
            raise LexError(str(value), 'number too large to fit in a 32-bit integer')
        return Integer(value)
    if t == "Bool":
        return Bool(bool(obj["value"]))
    if t == "Ident":
        return Ident(obj["name"])
    if t == "ListLit":
        return ListLit(tuple(ast_from_obj(e) for e in obj["elements"]))
    if t == "Unary":
        return Unary(UnOp(obj["operator"]), ast_from_obj(obj["operand"]))
    if t in OPERATOR_NODES:
        node_type, op_type = OPERATOR_NODES[t]
        return node_type(op_type(obj["operator"]), ast_from_obj(obj["lhs"]), ast_from_obj(obj["rhs"]))

    raise ValueError(f"Unknown AST node type: {t}")


def program_to_obj(statements: List[Stmt]) -> Dict[str, Any]:
    return {"type": "Program", "body": [ast_to_obj(s) for s in statements]}


def program_from_obj(obj: Dict[str, Any]) -> List[Stmt]:
    if not isinstance(obj, dict) or obj.get("type") != "Program":
        raise ValueError(f"Expected a Program object, got {obj!r}")
    return [ast_from_obj(s) for s in obj["body"]]
