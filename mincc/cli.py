"""
mincc - command-line interface
==============================

Compiles a program, prints its syntax tree, writes the generated C source,
then builds it with the system C compiler and runs it.

Usage Examples
--------------
Compile and run the default input (input.txt):
    $ mincc

Compile another file, keeping the generated C as hello.c:
    $ mincc hello.txt -o hello.c

Only generate C, without building or running it:
    $ mincc --no-run hello.txt

Use clang with a tighter run limit:
    $ CC=clang mincc --run-timeout 2 hello.txt
"""

import logging
import sys
import traceback
from enum import IntEnum
from pathlib import Path

import click

from mincc import driver
from mincc.options import (BuildOptions, DEFAULT_INPUT, DEFAULT_SOURCE,
                           DEFAULT_EXECUTABLE, DEFAULT_RESULTS)
from mincc.backend.toolchain import DEFAULT_COMPILER, DEFAULT_COMPILE_TIMEOUT, DEFAULT_RUN_TIMEOUT
from mincc.utils.error import CompilationError

RULE = "-------------------------"


class ExitCode(IntEnum):
    """Exit codes of the mincc command."""
    SUCCESS = 0
    COMPILE_ERROR = 1    # Lexical, syntax, declaration or resource error
    INVALID_ARGS = 2     # Reported by click itself
    INTERNAL_ERROR = 3   # Unexpected internal error


@click.command()
@click.argument(
    "input_file",
    required=False,
    default=DEFAULT_INPUT,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    default=DEFAULT_SOURCE,
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Generated C source file (default: {DEFAULT_SOURCE})",
)
@click.option(
    "--executable",
    default=DEFAULT_EXECUTABLE,
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Executable built from the C source (default: {DEFAULT_EXECUTABLE})",
)
@click.option(
    "--results",
    default=DEFAULT_RESULTS,
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"File receiving the program's output (default: {DEFAULT_RESULTS})",
)
@click.option(
    "--cc",
    default=DEFAULT_COMPILER,
    envvar="CC",
    show_envvar=True,
    help=f"C compiler command (default: {DEFAULT_COMPILER})",
)
@click.option(
    "--compile-timeout",
    default=DEFAULT_COMPILE_TIMEOUT,
    type=click.FloatRange(min=0, min_open=True),
    help="Seconds allowed for the C compiler",
)
@click.option(
    "--run-timeout",
    default=DEFAULT_RUN_TIMEOUT,
    type=click.FloatRange(min=0, min_open=True),
    help="Seconds allowed for the compiled program",
)
@click.option("--no-tree", is_flag=True, help="Do not print the syntax tree")
@click.option("--no-run", is_flag=True, help="Generate C source only")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
def main(
    input_file: Path,
    output: Path,
    executable: Path,
    results: Path,
    cc: str,
    compile_timeout: float,
    run_timeout: float,
    no_tree: bool,
    no_run: bool,
    verbose: bool,
) -> None:
    """
    Compile INPUT_FILE (default: input.txt) to C, then build and run it.

    \b
    The language has:
        - int declarations, optionally initialized
        - assignment, print(expr) and print("text")
        - if (...) { ... } else { ... }
        - + - * / == != < > <= >= and unary minus

    Compilation errors stop the tool with exit status 1. Failures of the C
    compiler or of the compiled program are reported but do not change the
    exit status.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    options = BuildOptions(
        input_path=input_file,
        source_path=output,
        executable_path=executable,
        results_path=results,
        compiler=cc,
        compile_timeout=compile_timeout,
        run_timeout=run_timeout,
        render_tree=not no_tree,
        run=not no_run,
    )

    try:
        compilation = driver.compile_file(options)
    except CompilationError as e:
        click.echo(f"error: {e.format()}", err=True)
        sys.exit(ExitCode.COMPILE_ERROR)
    except Exception as e:
        click.echo(f"Internal error: {e}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)

    if options.render_tree:
        click.echo("\n--- VISUAL PARSE TREE ---")
        click.echo(compilation.tree, nl=False)
        click.echo(RULE + "\n")

    if verbose:
        click.echo(f"Wrote {options.source_path}")

    if not options.run:
        return

    report = driver.execute(options)
    click.echo("\n--- EXECUTION RESULTS ---")
    for error in report.errors:
        click.echo(f"Error: {error.format()}", err=True)
    if report.ran:
        click.echo(report.output, nl=False)
        click.echo(f"\n(Output saved to '{options.results_path}')")
    click.echo(RULE)


if __name__ == "__main__":
    main()
