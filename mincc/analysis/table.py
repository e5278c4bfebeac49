from mincc.utils.error import DuplicateDeclaration, UndeclaredVariable


class SymbolTable(object):
    """Flat, unscoped set of declared variable names.

    There is a single scope for the whole program: a name declared anywhere
    stays visible until the end of the compilation and can never be
    declared again.
    """

    def __init__(self):
        self.names = set()

    def declare(self, name, coord=None):
        if name in self.names:
            raise DuplicateDeclaration(name, *_location(coord))
        self.names.add(name)

    def lookup(self, name, coord=None):
        if name not in self.names:
            raise UndeclaredVariable(name, *_location(coord))

    def __contains__(self, name):
        return name in self.names

    def __len__(self):
        return len(self.names)

    def __iter__(self):
        return iter(sorted(self.names))

    def __repr__(self):
        return "SymbolTable(%s)" % ", ".join(self)


def _location(coord):
    if coord is None:
        return None, None
    return coord.line, coord.column
