"""
The compilation pipeline: parse, render, generate, then build and run.

Each step starts only after the previous one has finished. Compilation
errors propagate to the caller and stop the pipeline before any C source
is written; toolchain failures come back inside the ExecutionReport.
"""

import logging
from dataclasses import dataclass

from mincc.analysis.table import SymbolTable
from mincc.backend.csource import CSourceGenerator, write_source
from mincc.backend.toolchain import Toolchain, ExecutionReport
from mincc.frontend.ast import StatementList
from mincc.frontend.builder import ASTBuilder
from mincc.frontend.parser import Parser
from mincc.frontend.printer import TreeRenderer
from mincc.options import BuildOptions
from mincc.utils.error import ResourceError

logger = logging.getLogger(__name__)


@dataclass
class Compilation:
    """A successfully compiled program and everything derived from it."""
    program: StatementList
    symbols: SymbolTable
    tree: str
    source: str


def read_source(path):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except OSError as e:
        raise ResourceError(path, e.strerror or str(e))
    except UnicodeDecodeError:
        raise ResourceError(path, "not valid UTF-8")


def compile_source(text, parser=None) -> Compilation:
    """Compile program text into its tree rendering and C source."""
    parser = parser if parser is not None else Parser()
    builder = ASTBuilder(SymbolTable())
    program = parser.parse(text, builder)
    tree = TreeRenderer().render(program)
    source = CSourceGenerator().generate(program)
    return Compilation(program, builder.symbols, tree, source)


def compile_file(options: BuildOptions) -> Compilation:
    """Compile ``options.input_path`` and write the C source artifact."""
    text = read_source(options.input_path)
    logger.debug(f"compiling {options.input_path}")
    compilation = compile_source(text)
    write_source(compilation.source, options.source_path)
    return compilation


def execute(options: BuildOptions, toolchain=None) -> ExecutionReport:
    """Build the generated source and run the resulting program."""
    if toolchain is None:
        toolchain = Toolchain(options.compiler, options.compile_timeout, options.run_timeout)
    return toolchain.execute(options.source_path, options.executable_path, options.results_path)
