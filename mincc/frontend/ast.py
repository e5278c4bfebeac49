BINARY_OPERATORS = ('+', '-', '*', '/', '==', '!=', '<', '>', '<=', '>=')
NEGATION = 'neg'


class Node(object):
    def __init__(self):
        self.coord = None

    @property
    def children(self):
        return ()


class StatementList(Node):
    def __init__(self, statements=None):
        super().__init__()
        self.statements = list(statements) if statements else []

    @property
    def children(self):
        return tuple(self.statements)

    def append(self, statement):
        self.statements.append(statement)
        return self

    def __len__(self):
        return len(self.statements)


class Declaration(Node):
    def __init__(self, name, initializer=None):
        super().__init__()
        self.name = name
        self.initializer = initializer

    @property
    def children(self):
        return (self.initializer,) if self.initializer is not None else ()


class Print(Node):
    def __init__(self, expression):
        super().__init__()
        self.expression = expression

    @property
    def children(self):
        return (self.expression,)


class PrintString(Node):
    def __init__(self, text):
        super().__init__()
        # Quotes included, exactly as written in the source.
        self.text = text


class If(Node):
    def __init__(self, condition, then_part, else_part=None):
        super().__init__()
        self.condition = condition
        self.then_part = then_part
        self.else_part = else_part

    @property
    def children(self):
        if self.else_part is None:
            return (self.condition, self.then_part)
        return (self.condition, self.then_part, self.else_part)


class Expression(Node):
    pass


class Assignment(Expression):
    def __init__(self, name, value):
        super().__init__()
        self.name = name
        self.value = value

    @property
    def children(self):
        return (self.value,)


class BinaryOperator(Expression):
    """Operator application. ``neg`` is the only unary operator."""

    def __init__(self, op, left, right=None):
        super().__init__()
        if op == NEGATION:
            if right is not None:
                raise ValueError("'neg' takes a single operand")
        elif op in BINARY_OPERATORS:
            if right is None:
                raise ValueError("operator '%s' needs two operands" % op)
        else:
            raise ValueError("unknown operator '%s'" % op)
        self.op = op
        self.left = left
        self.right = right

    @property
    def is_unary(self):
        return self.op == NEGATION

    @property
    def children(self):
        if self.right is None:
            return (self.left,)
        return (self.left, self.right)

    def __repr__(self):
        if self.is_unary:
            return "(-%r)" % (self.left,)
        return "(%r %s %r)" % (self.left, self.op, self.right)


class NumberLiteral(Expression):
    def __init__(self, value):
        super().__init__()
        self.value = value

    def __repr__(self):
        return str(self.value)


class Identifier(Expression):
    def __init__(self, name):
        super().__init__()
        self.name = name

    def __repr__(self):
        return self.name
