"""
Build and run generated C programs with an external toolchain.

The C compiler and the produced executable both run as blocking
subprocesses bounded by a timeout. Their failures are diagnostics: they
are collected in the ExecutionReport and never abort the tool.
"""

import logging
import os
import subprocess
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from mincc.utils.error import BuildError, ToolchainError, ProgramRuntimeError

logger = logging.getLogger(__name__)

DEFAULT_COMPILER = 'gcc'
DEFAULT_COMPILE_TIMEOUT = 60.0
DEFAULT_RUN_TIMEOUT = 10.0


@dataclass
class ProcessResult:
    """Outcome of one external process."""
    command: List[str]
    returncode: Optional[int]
    stdout: str = ''
    stderr: str = ''
    timed_out: bool = False

    @property
    def ok(self) -> bool:
        return not self.timed_out and self.returncode == 0


def run_process(command, timeout=None, stdout=None) -> ProcessResult:
    """
    Run ``command`` to completion and capture what it printed.

    Args:
        command: Argument list; no shell is involved
        timeout: Seconds to wait before the process is killed (None waits forever)
        stdout: Optional open file receiving the process's standard output;
            when omitted, standard output is captured in the result

    Raises:
        FileNotFoundError: The program does not exist
    """
    logger.debug(f"running {' '.join(command)} (timeout={timeout})")
    try:
        result = subprocess.run(
            command,
            stdout=stdout if stdout is not None else subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        stderr = e.stderr.decode(errors='replace') if isinstance(e.stderr, bytes) else (e.stderr or '')
        return ProcessResult(list(command), None, '', stderr, timed_out=True)

    return ProcessResult(list(command), result.returncode,
                         result.stdout or '', result.stderr or '')


@dataclass
class ExecutionReport:
    """What happened while building and running one generated program."""
    compiled: bool = False
    ran: bool = False
    output: str = ''
    errors: List[BuildError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.compiled and self.ran and not self.errors


class Toolchain:
    """Compiles generated C source with an external compiler and runs it."""

    def __init__(self, compiler=DEFAULT_COMPILER, compile_timeout=DEFAULT_COMPILE_TIMEOUT,
                 run_timeout=DEFAULT_RUN_TIMEOUT, runner: Callable[..., ProcessResult] = run_process):
        self.compiler = compiler
        self.compile_timeout = compile_timeout
        self.run_timeout = run_timeout
        self.runner = runner

    def compile(self, source_path, executable_path):
        """
        Compile a C source file into an executable.

        Raises:
            ToolchainError: The compiler is missing, cannot be started,
                failed or timed out
        """
        command = [self.compiler, str(source_path), '-o', str(executable_path)]
        try:
            result = self.runner(command, timeout=self.compile_timeout)
        except FileNotFoundError:
            raise ToolchainError(f"compiler '{self.compiler}' not found", command)
        except OSError as e:
            raise ToolchainError(f"cannot run compiler '{self.compiler}': {e}", command)

        if result.timed_out:
            raise ToolchainError(f"compilation timed out after {self.compile_timeout}s",
                                 command, stderr=result.stderr)
        if result.returncode != 0:
            raise ToolchainError("compilation failed", command, result.returncode, result.stderr)
        logger.debug(f"compiled {source_path} -> {executable_path}")

    def run(self, executable_path, results_path):
        """
        Run an executable, sending its standard output to ``results_path``.

        Raises:
            ProgramRuntimeError: The program exited nonzero, timed out or
                could not be started
        """
        command = [os.path.abspath(str(executable_path))]
        try:
            with open(results_path, 'w') as results:
                result = self.runner(command, timeout=self.run_timeout, stdout=results)
        except OSError as e:
            raise ProgramRuntimeError(f"cannot run program: {e}", command)

        if result.timed_out:
            raise ProgramRuntimeError(f"program timed out after {self.run_timeout}s",
                                      command, stderr=result.stderr)
        if result.returncode != 0:
            raise ProgramRuntimeError(f"program exited with status {result.returncode}",
                                      command, result.returncode, result.stderr)

    def execute(self, source_path, executable_path, results_path) -> ExecutionReport:
        """Compile, run and collect the output of a generated program.

        Build and run failures are recorded in the returned report instead
        of being raised. No run is attempted when compilation fails.
        """
        report = ExecutionReport()
        try:
            self.compile(source_path, executable_path)
        except ToolchainError as e:
            logger.debug(f"toolchain error: {e.message}")
            report.errors.append(e)
            return report
        report.compiled = True

        try:
            self.run(executable_path, results_path)
        except ProgramRuntimeError as e:
            logger.debug(f"runtime error: {e.message}")
            report.errors.append(e)
            return report
        report.ran = True

        try:
            with open(results_path, 'r') as f:
                report.output = f.read()
        except OSError as e:
            report.errors.append(ProgramRuntimeError(f"cannot read results: {e}"))
        return report
