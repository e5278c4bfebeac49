import ply.lex as lex

from mincc.utils.error import LexicalError


class Coord(object):
    def __init__(self, line, column):
        self.line = line
        self.column = column

    def __repr__(self):
        return "%d:%d" % (self.line, self.column)


class Lexer(object):
    keywords = {
        'int':   'INT',
        'print': 'PRINT',
        'if':    'IF',
        'else':  'ELSE',
    }

    tokens = [
        'IDENTIFIER',
        'NUMBER',
        'STRING_LITERAL',
        'EQUAL',
        'NOT_EQUAL',
        'LE',
        'GE',
        'LT',
        'GT',
        'ASSIGN',
        'PLUS',
        'MINUS',
        'TIMES',
        'DIV',
        'LPAREN',
        'RPAREN',
        'LBRACE',
        'RBRACE',
        'SEMICOLON',
    ] + list(keywords.values())

    t_ignore = ' \t\r'

    def __init__(self):
        self.lexer = None

    def build(self, **kwargs):
        self.lexer = lex.lex(module=self, **kwargs)

    def input(self, text):
        self.lexer.lineno = 1
        self.lexer.input(text)

    def token(self):
        return self.lexer.token()

    def tokenize(self, text):
        self.input(text)
        while True:
            tok = self.token()
            if tok is None:
                break
            yield tok

    def token_column(self, t):
        last_cr = t.lexer.lexdata.rfind('\n', 0, t.lexpos)
        return t.lexpos - last_cr

    def _set_token_value(self, t, value=None):
        """Helper method to set token value with line and column information."""
        if value is None:
            value = t.value
        t.value = (value, t.lineno, self.token_column(t))
        return t

    def t_NUMBER(self, t):
        r"""[0-9]+"""
        return self._set_token_value(t, int(t.value))

    # Must precede t_DIV
    def t_COMMENT(self, t):
        r"""//[^\n]*"""

    def t_STRING_LITERAL(self, t):
        r'''"([^"\\\n]|\\.)*"'''
        # Kept verbatim, quotes and escapes included: it is emitted as-is.
        return self._set_token_value(t)

    def t_IDENTIFIER(self, t):
        r"""[a-zA-Z_][a-zA-Z0-9_]*"""
        t.type = self.keywords.get(t.value, 'IDENTIFIER')
        return self._set_token_value(t)

    # Order matters: longer patterns must come before shorter ones
    def t_EQUAL(self, t):
        r"""=="""
        return self._set_token_value(t)

    def t_NOT_EQUAL(self, t):
        r"""!="""
        return self._set_token_value(t)

    def t_LE(self, t):
        r"""<="""
        return self._set_token_value(t)

    def t_GE(self, t):
        r""">="""
        return self._set_token_value(t)

    def t_LT(self, t):
        r"""<"""
        return self._set_token_value(t)

    def t_GT(self, t):
        r""">"""
        return self._set_token_value(t)

    def t_ASSIGN(self, t):
        r"""="""
        return self._set_token_value(t)

    def t_PLUS(self, t):
        r"""\+"""
        return self._set_token_value(t)

    def t_MINUS(self, t):
        r"""\-"""
        return self._set_token_value(t)

    def t_TIMES(self, t):
        r"""\*"""
        return self._set_token_value(t)

    def t_DIV(self, t):
        r"""\/"""
        return self._set_token_value(t)

    def t_LPAREN(self, t):
        r"""\("""
        return self._set_token_value(t)

    def t_RPAREN(self, t):
        r"""\)"""
        return self._set_token_value(t)

    def t_LBRACE(self, t):
        r"""\{"""
        return self._set_token_value(t)

    def t_RBRACE(self, t):
        r"""\}"""
        return self._set_token_value(t)

    def t_SEMICOLON(self, t):
        r""";"""
        return self._set_token_value(t)

    def t_NEWLINE(self, t):
        r"""\n+"""
        t.lexer.lineno += len(t.value)

    def t_error(self, t):
        char = t.value[0] if t.value else '?'
        raise LexicalError("unknown character '%s'" % char,
                           t.lexer.lineno, self.token_column(t))
