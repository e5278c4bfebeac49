import logging

import ply.yacc as yacc

from mincc.frontend.builder import ASTBuilder
from mincc.frontend.lexer import Lexer, Coord
from mincc.utils.error import ParseError

logger = logging.getLogger(__name__)


def _coord(token_value):
    return Coord(token_value[1], token_value[2])


class Parser(object):
    start = 'program'

    precedence = (
        ('right', 'ASSIGN'),
        ('left', 'EQUAL', 'NOT_EQUAL'),
        ('left', 'LT', 'GT', 'LE', 'GE'),
        ('left', 'PLUS', 'MINUS'),
        ('left', 'TIMES', 'DIV'),
        ('right', 'UMINUS'),
    )

    def __init__(self):
        self.builder = None
        self.lexer = Lexer()
        self.lexer.build(optimize=False)
        self.tokens = self.lexer.tokens
        self.parser = yacc.yacc(module=self, optimize=False, debug=False, write_tables=False)

    def parse(self, input_text, builder=None):
        """Parse a whole program and return its StatementList.

        Semantic actions are delegated to ``builder``; a fresh ASTBuilder
        (with a fresh symbol table) is used when none is given. Any error
        propagates out of this call, so a tree is returned only for a
        program that is entirely valid.
        """
        self.builder = builder if builder is not None else ASTBuilder()
        self.lexer.input(input_text)
        logger.debug("parsing %d characters", len(input_text))
        program = self.parser.parse(lexer=self.lexer.lexer)
        logger.debug("parsed %d top-level statements, %d names declared",
                     len(program), len(self.builder.symbols))
        return program

    def p_program(self, p):
        """program : stmt_list"""
        p[0] = self.builder.program(p[1])

    def p_statement_list(self, p):
        """stmt_list : stmt_list statement
                     |
        """
        if len(p) == 3:
            p[0] = self.builder.append_statement(p[1], p[2])
        else:
            p[0] = self.builder.empty_statements()

    def p_declaration(self, p):
        """statement : INT IDENTIFIER SEMICOLON
                     | INT IDENTIFIER ASSIGN expression SEMICOLON"""
        if len(p) == 6:
            p[0] = self.builder.declaration(p[2][0], _coord(p[2]), p[4])
        else:
            p[0] = self.builder.declaration(p[2][0], _coord(p[2]))

    def p_expression_statement(self, p):
        """statement : expression SEMICOLON"""
        p[0] = p[1]

    def p_print_expression(self, p):
        """statement : PRINT LPAREN expression RPAREN SEMICOLON"""
        p[0] = self.builder.print_expression(p[3], _coord(p[1]))

    def p_print_string(self, p):
        """statement : PRINT LPAREN STRING_LITERAL RPAREN SEMICOLON"""
        p[0] = self.builder.print_string(p[3][0], _coord(p[1]))

    def p_control_if(self, p):
        """statement : IF LPAREN expression RPAREN block
                     | IF LPAREN expression RPAREN block ELSE block
        """
        if len(p) == 6:
            p[0] = self.builder.if_statement(p[3], p[5], coord=_coord(p[1]))
        else:
            p[0] = self.builder.if_statement(p[3], p[5], p[7], coord=_coord(p[1]))

    def p_block(self, p):
        """block : LBRACE stmt_list RBRACE"""
        p[0] = p[2]

    def p_assignment(self, p):
        """expression : IDENTIFIER ASSIGN expression"""
        p[0] = self.builder.assignment(p[1][0], _coord(p[1]), p[3])

    def p_binary_expression(self, p):
        """expression : expression EQUAL expression
                      | expression NOT_EQUAL expression
                      | expression LT expression
                      | expression GT expression
                      | expression LE expression
                      | expression GE expression
                      | expression PLUS expression
                      | expression MINUS expression
                      | expression TIMES expression
                      | expression DIV expression"""
        p[0] = self.builder.binary(p[2][0], p[1], p[3], _coord(p[2]))

    def p_unary_minus(self, p):
        """expression : MINUS expression %prec UMINUS"""
        p[0] = self.builder.negate(p[2], _coord(p[1]))

    def p_expression_paren(self, p):
        """expression : LPAREN expression RPAREN"""
        p[0] = p[2]

    def p_expression_number(self, p):
        """expression : NUMBER"""
        p[0] = self.builder.number(p[1][0], _coord(p[1]))

    def p_expression_identifier(self, p):
        """expression : IDENTIFIER"""
        p[0] = self.builder.identifier(p[1][0], _coord(p[1]))

    def p_error(self, p):
        if p is None:
            raise ParseError("unexpected end of input")
        raise ParseError("unexpected token '%s'" % p.value[0], p.value[1], p.value[2])
