"""
Semantic actions applied to the parser's reductions.

The parser calls exactly one method of ASTBuilder per grammar rule it
reduces, passing the child nodes it has already built. The builder owns the
symbol table for the compilation: declarations are entered before their
node is created, and every identifier is looked up before it is used. A
failed check raises immediately, which abandons the whole parse.
"""

from mincc.analysis.table import SymbolTable
from mincc.frontend.ast import (StatementList, Declaration, Assignment, Print,
                                PrintString, If, BinaryOperator, NumberLiteral,
                                Identifier, NEGATION)


class ASTBuilder(object):
    def __init__(self, symbols=None):
        self.symbols = symbols if symbols is not None else SymbolTable()

    def program(self, statements):
        return statements

    def empty_statements(self):
        return StatementList()

    def append_statement(self, statements, statement):
        return statements.append(statement)

    def declaration(self, name, coord=None, initializer=None):
        self.symbols.declare(name, coord)
        return _at(Declaration(name, initializer), coord)

    def assignment(self, name, coord, value):
        self.symbols.lookup(name, coord)
        return _at(Assignment(name, value), coord)

    def print_expression(self, expression, coord=None):
        return _at(Print(expression), coord)

    def print_string(self, text, coord=None):
        return _at(PrintString(text), coord)

    def if_statement(self, condition, then_part, else_part=None, coord=None):
        return _at(If(condition, then_part, else_part), coord)

    def binary(self, op, left, right, coord=None):
        return _at(BinaryOperator(op, left, right), coord)

    def negate(self, operand, coord=None):
        return _at(BinaryOperator(NEGATION, operand), coord)

    def number(self, value, coord=None):
        return _at(NumberLiteral(value), coord)

    def identifier(self, name, coord=None):
        self.symbols.lookup(name, coord)
        return _at(Identifier(name), coord)


def _at(node, coord):
    node.coord = coord
    return node
