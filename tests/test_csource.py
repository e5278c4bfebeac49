"""
Tests for the C source generator.
"""

import pytest

from mincc.backend.csource import CSourceGenerator, generate_c, write_source
from mincc.frontend.ast import (StatementList, BinaryOperator, NumberLiteral,
                                Identifier, Assignment, Print, If)
from mincc.frontend.parser import Parser
from mincc.utils.error import ResourceError


@pytest.fixture(scope="module")
def parser():
    return Parser()


def body(source):
    """Lines between the opening of main and its return statement."""
    lines = source.splitlines()
    start = lines.index("int main() {") + 1
    end = lines.index("    return 0;")
    return lines[start:end]


class TestExpressions:
    """Fully parenthesized expression text."""

    def test_literals(self):
        gen = CSourceGenerator()
        assert gen.expression(NumberLiteral(42)) == "42"
        assert gen.expression(Identifier("total")) == "total"

    def test_binary(self):
        expr = BinaryOperator('+', NumberLiteral(1), BinaryOperator('*', NumberLiteral(2), Identifier("x")))
        assert CSourceGenerator().expression(expr) == "(1 + (2 * x))"

    def test_negation(self):
        expr = BinaryOperator('neg', BinaryOperator('neg', Identifier("x")))
        assert CSourceGenerator().expression(expr) == "(-(-x))"

    def test_assignment(self):
        expr = Assignment("x", BinaryOperator('-', Identifier("x"), NumberLiteral(1)))
        assert CSourceGenerator().expression(expr) == "(x = (x - 1))"

    def test_statement_is_not_an_expression(self):
        with pytest.raises(TypeError):
            CSourceGenerator().expression(Print(NumberLiteral(1)))

    @pytest.mark.parametrize("op", ['==', '!=', '<', '>', '<=', '>='])
    def test_relational(self, op):
        expr = BinaryOperator(op, Identifier("a"), Identifier("b"))
        assert CSourceGenerator().expression(expr) == "(a %s b)" % op

    def test_operand_count_is_checked(self):
        with pytest.raises(ValueError):
            BinaryOperator('+', NumberLiteral(1))
        with pytest.raises(ValueError):
            BinaryOperator('neg', NumberLiteral(1), NumberLiteral(2))
        with pytest.raises(ValueError):
            BinaryOperator('%', NumberLiteral(1), NumberLiteral(2))


def structure(node):
    if isinstance(node, NumberLiteral):
        return node.value
    if isinstance(node, Identifier):
        return node.name
    if isinstance(node, Assignment):
        return ('=', node.name, structure(node.value))
    return (node.op,) + tuple(structure(c) for c in node.children)


class TestPrecedenceIndependence:
    """Generated expressions read back into the same operator tree."""

    @pytest.mark.parametrize("text", [
        "1 + 2 * 3",
        "(1 + 2) * 3",
        "a - b - c",
        "a - (b - c)",
        "-a * -b",
        "-(a + b) / c",
        "a < b == b >= c",
        "a = b = c + 1",
        "1 - -1",
    ])
    def test_round_trip(self, parser, text):
        decls = "int a; int b; int c; "
        original = parser.parse(decls + "print(%s);" % text).statements[-1].expression
        generated = CSourceGenerator().expression(original)
        reparsed = parser.parse(decls + "print(%s);" % generated).statements[-1].expression
        assert structure(reparsed) == structure(original)


class TestStatements:
    """Statement layout inside main."""

    def test_whole_program(self, parser):
        program = parser.parse("int x = 2 * 8; print(x);")
        assert generate_c(program) == (
            "#include <stdio.h>\n"
            "#include <stdlib.h>\n"
            "\n"
            "int main() {\n"
            "    int x = (2 * 8);\n"
            '    printf("%d\\n", x);\n'
            "    return 0;\n"
            "}\n"
        )

    def test_empty_program(self):
        assert body(generate_c(StatementList())) == []

    def test_plain_declaration_and_assignment(self, parser):
        program = parser.parse("int x; x = 5; print(x + 1);")
        assert body(generate_c(program)) == [
            "    int x;",
            "    (x = 5);",
            '    printf("%d\\n", (x + 1));',
        ]

    def test_print_string_is_verbatim(self, parser):
        program = parser.parse(r'print("tab\there");')
        assert body(generate_c(program)) == [r'    printf("%s\n", "tab\there");']

    def test_if_else(self, parser):
        program = parser.parse("if (1 < 2) { print(1); } else { print(2); }")
        assert body(generate_c(program)) == [
            "    if ((1 < 2)) {",
            '        printf("%d\\n", 1);',
            "    } else {",
            '        printf("%d\\n", 2);',
            "    }",
        ]

    def test_if_without_else(self, parser):
        program = parser.parse("int a; if (a) { a = 1; }")
        assert body(generate_c(program)) == [
            "    int a;",
            "    if (a) {",
            "        (a = 1);",
            "    }",
        ]

    def test_nested_if_indentation(self, parser):
        program = parser.parse("if (1) { if (2) { print(3); } else { } }")
        assert body(generate_c(program)) == [
            "    if (1) {",
            "        if (2) {",
            '            printf("%d\\n", 3);',
            "        } else {",
            "        }",
            "    }",
        ]

    def test_hand_built_if(self):
        node = If(NumberLiteral(0), StatementList([Print(NumberLiteral(1))]))
        assert body(generate_c(StatementList([node]))) == [
            "    if (0) {",
            '        printf("%d\\n", 1);',
            "    }",
        ]


class TestWrite:
    def test_write_creates_file(self, parser, tmp_path):
        path = tmp_path / "out.c"
        source = CSourceGenerator().write(parser.parse("print(1);"), path)
        assert path.read_text() == source

    def test_unwritable_path(self, tmp_path):
        with pytest.raises(ResourceError):
            CSourceGenerator().write(StatementList(), tmp_path / "missing" / "out.c")

    def test_write_source_keeps_text(self, tmp_path):
        path = tmp_path / "out.c"
        text = "int main() { return 0; }\n"
        assert write_source(text, path) == text
        assert path.read_text() == text

    def test_write_source_unwritable_path(self, tmp_path):
        with pytest.raises(ResourceError):
            write_source("", tmp_path / "missing" / "out.c")
