"""
C source generator for the mincc compiler.

Translates a finished AST into one C translation unit whose ``main``
runs the program. Every operator application is emitted fully
parenthesized, so the meaning of the generated expressions never depends
on C's own precedence rules.
"""

import logging

from mincc.frontend.ast import (StatementList, Declaration, Assignment, Print,
                                PrintString, If, BinaryOperator, NumberLiteral,
                                Identifier, Expression)
from mincc.utils.error import ResourceError

logger = logging.getLogger(__name__)

INDENT = "    "

PROLOGUE = [
    "#include <stdio.h>",
    "#include <stdlib.h>",
    "",
    "int main() {",
]

EPILOGUE = [
    INDENT + "return 0;",
    "}",
]


class CSourceGenerator:
    """Converts an AST to C source text."""

    def __init__(self):
        self.output = []  # List of output lines

    def emit(self, line, depth=0):
        """Emit a line of C code at the given nesting depth."""
        self.output.append(INDENT * depth + line)

    def generate(self, program):
        """Generate the complete C program for a top-level StatementList."""
        self.output = []
        for line in PROLOGUE:
            self.emit(line)
        self.generate_statements(program, 1)
        for line in EPILOGUE:
            self.emit(line)
        logger.debug("generated %d lines of C", len(self.output))
        return "\n".join(self.output) + "\n"

    def write(self, program, path):
        """Generate the program and write it to ``path``."""
        return write_source(self.generate(program), path)

    def generate_statements(self, statements, depth):
        for statement in statements.children:
            self.generate_statement(statement, depth)

    def generate_statement(self, node, depth):
        if isinstance(node, Declaration):
            if node.initializer is not None:
                self.emit("int %s = %s;" % (node.name, self.expression(node.initializer)), depth)
            else:
                self.emit("int %s;" % node.name, depth)

        elif isinstance(node, Print):
            self.emit('printf("%%d\\n", %s);' % self.expression(node.expression), depth)

        elif isinstance(node, PrintString):
            self.emit('printf("%%s\\n", %s);' % node.text, depth)

        elif isinstance(node, If):
            self.emit("if (%s) {" % self.expression(node.condition), depth)
            self.generate_statements(node.then_part, depth + 1)
            if node.else_part is not None:
                self.emit("} else {", depth)
                self.generate_statements(node.else_part, depth + 1)
            self.emit("}", depth)

        elif isinstance(node, StatementList):
            self.generate_statements(node, depth)

        elif isinstance(node, Expression):
            self.emit("%s;" % self.expression(node), depth)

        else:
            raise TypeError("cannot generate code for %s" % type(node).__name__)

    def expression(self, node):
        """Return the fully parenthesized C text of an expression."""
        if isinstance(node, NumberLiteral):
            return str(node.value)
        elif isinstance(node, Identifier):
            return node.name
        elif isinstance(node, Assignment):
            return "(%s = %s)" % (node.name, self.expression(node.value))
        elif isinstance(node, BinaryOperator):
            if node.is_unary:
                return "(-%s)" % self.expression(node.left)
            return "(%s %s %s)" % (self.expression(node.left), node.op,
                                   self.expression(node.right))
        raise TypeError("not an expression: %s" % type(node).__name__)


def generate_c(program):
    return CSourceGenerator().generate(program)


def write_source(source, path):
    """Write already generated C text to ``path``."""
    try:
        with open(path, 'w') as f:
            f.write(source)
    except OSError as e:
        raise ResourceError(path, e.strerror or str(e))
    logger.debug("wrote generated source to %s", path)
    return source
