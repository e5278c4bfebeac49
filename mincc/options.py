from dataclasses import dataclass
from pathlib import Path

from mincc.backend.toolchain import DEFAULT_COMPILER, DEFAULT_COMPILE_TIMEOUT, DEFAULT_RUN_TIMEOUT

DEFAULT_INPUT = 'input.txt'
DEFAULT_SOURCE = 'output.c'
DEFAULT_EXECUTABLE = 'program'
DEFAULT_RESULTS = 'result.txt'


@dataclass
class BuildOptions:
    """Where the pipeline reads and writes, and how it drives the toolchain."""
    input_path: Path = Path(DEFAULT_INPUT)
    source_path: Path = Path(DEFAULT_SOURCE)
    executable_path: Path = Path(DEFAULT_EXECUTABLE)
    results_path: Path = Path(DEFAULT_RESULTS)
    compiler: str = DEFAULT_COMPILER
    compile_timeout: float = DEFAULT_COMPILE_TIMEOUT
    run_timeout: float = DEFAULT_RUN_TIMEOUT
    render_tree: bool = True
    run: bool = True
