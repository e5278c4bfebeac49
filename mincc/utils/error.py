"""
Error reporting for the mincc compiler.

Compilation is fail-fast: the first error raised stops the whole run and
is reported by the top-level caller. Every compilation error carries an
error code, a category and (when known) a source location.

Build and run failures of the external toolchain are a separate family
(BuildError). They are reported as diagnostics and never abort the tool.
"""

from typing import Optional


ERROR_CODES = {
    'E0001': 'syntax error',
    'E0002': 'lexical error',
    'E0003': 'name error',
    'E0005': 'semantic error',
    'E0006': 'resource error',
}


class CompilationError(Exception):
    """Base class for errors that terminate a compilation."""

    code = 'E0005'
    category = ERROR_CODES[code]

    def __init__(self, message: str, line: Optional[int] = None,
                 column: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def format(self) -> str:
        """Format the error as a single diagnostic line."""
        text = f"{self.code}: {self.category}: {self.message}"
        if self.line is not None:
            if self.column is not None:
                text += f" (line {self.line}, column {self.column})"
            else:
                text += f" (line {self.line})"
        return text

    def __str__(self):
        return self.format()


class ParseError(CompilationError):
    code = 'E0001'
    category = ERROR_CODES[code]


class LexicalError(CompilationError):
    code = 'E0002'
    category = ERROR_CODES[code]


class DeclarationError(CompilationError):
    """Declaration errors raised by the symbol table."""

    code = 'E0003'
    category = ERROR_CODES[code]

    def __init__(self, name: str, message: str, line=None, column=None):
        super().__init__(message, line, column)
        self.name = name


class DuplicateDeclaration(DeclarationError):
    def __init__(self, name: str, line=None, column=None):
        super().__init__(name, f"variable '{name}' is already declared", line, column)


class UndeclaredVariable(DeclarationError):
    def __init__(self, name: str, line=None, column=None):
        super().__init__(name, f"variable '{name}' used but not declared", line, column)


class ResourceError(CompilationError):
    """An input or output artifact could not be opened."""

    code = 'E0006'
    category = ERROR_CODES[code]

    def __init__(self, path, reason: str):
        super().__init__(f"cannot open '{path}': {reason}")
        self.path = path


class BuildError(Exception):
    """Failure of an external toolchain step. Reported, never fatal."""

    label = 'build error'

    def __init__(self, message: str, command=None, returncode: Optional[int] = None,
                 stderr: str = ''):
        super().__init__(message)
        self.message = message
        self.command = command
        self.returncode = returncode
        self.stderr = stderr

    def format(self) -> str:
        text = f"{self.label}: {self.message}"
        if self.stderr:
            text += "\n" + self.stderr.rstrip()
        return text


class ToolchainError(BuildError):
    """The external C compiler failed, timed out or is missing."""

    label = 'toolchain error'


class ProgramRuntimeError(BuildError):
    """The generated executable exited with a nonzero status or timed out."""

    label = 'runtime error'
