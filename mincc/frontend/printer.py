from mincc.frontend.ast import (StatementList, Declaration, Assignment, Print,
                                PrintString, If, BinaryOperator, NumberLiteral,
                                Identifier)


class TreeRenderer(object):
    """Renders an AST as an ASCII tree.

    Every node is printed on its own line behind a connector, ``|-- `` for
    a node with further siblings and ``+-- `` for the last one. Bit ``b`` of
    the mask is set when the ancestor at depth ``b`` still has siblings to
    come, which decides between a ``|   `` bar and blank padding.
    """

    def __init__(self):
        self.lines = []

    def render(self, program):
        """Return the tree of a whole program, rooted at a BLOCK line."""
        self.lines = []
        if program is not None and len(program) > 0:
            self.visit(program, 0, True, 0)
        return "".join(line + "\n" for line in self.lines)

    def _prefix(self, depth, is_last, mask):
        prefix = ""
        # The root has no connector, so columns start at depth 1.
        for i in range(1, depth):
            prefix += "|   " if mask & (1 << i) else "    "
        if depth > 0:
            prefix += "+-- " if is_last else "|-- "
        return prefix

    def label(self, node):
        if isinstance(node, StatementList):
            return "BLOCK"
        elif isinstance(node, Declaration):
            return "DECL (%s)" % node.name
        elif isinstance(node, Assignment):
            return "ASSIGN (=) %s" % node.name
        elif isinstance(node, Print):
            return "PRINT (Expr)"
        elif isinstance(node, PrintString):
            return "PRINT (String): %s" % node.text
        elif isinstance(node, If):
            return "IF"
        elif isinstance(node, BinaryOperator):
            return "OP (%s)" % node.op
        elif isinstance(node, NumberLiteral):
            return "NUM (%d)" % node.value
        elif isinstance(node, Identifier):
            return "ID (%s)" % node.name
        return "UNKNOWN"

    def visit(self, node, depth, is_last, mask):
        self.lines.append(self._prefix(depth, is_last, mask) + self.label(node))

        next_mask = mask if is_last else mask | (1 << depth)
        children = node.children
        for i, child in enumerate(children):
            self.visit(child, depth + 1, i == len(children) - 1, next_mask)


def render_tree(program):
    return TreeRenderer().render(program)
