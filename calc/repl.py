"""
Interactive read-eval-print loop.

Reads one line at a time, prints the infix rendering, tree dump and result
for each, and reports failures as a single "Error: ..." line on the error
stream before moving on. The loop ends when the input is exhausted.
"""

import sys
from typing import Optional, TextIO

from .core.config import Settings, get_settings
from .core.errors import CalcError
from .core.logging import get_context_logger
from .service import Calculator


class Session:
    """A read loop bound to an input, an output and an error stream"""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        prompt: bool = True,
    ):
        self.settings = settings or get_settings()
        self.calculator = Calculator(self.settings)
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.prompt = prompt
        self.logger = get_context_logger(__name__, source=getattr(self.stdin, "name", "<stream>"))

    def run(self) -> int:
        """
        Process lines until end of input.

        Returns:
            Number of lines that failed
        """
        failures = 0
        line_no = 0

        while True:
            self._write_prompt()
            try:
                line = self.stdin.readline()
            except KeyboardInterrupt:
                self.stdout.write("\n")
                break
            if not line:
                break

            line_no += 1
            if not self.execute(line.rstrip("\r\n"), line_no):
                failures += 1

        return failures

    def execute(self, text: str, line_no: int = 1) -> bool:
        """
        Process a single line, printing its outputs or its error.

        Returns:
            True if the line succeeded
        """
        try:
            calculation = self.calculator.calculate(text)
        except CalcError as exc:
            self.logger.debug(
                "Line %d failed: %s",
                line_no,
                exc.message,
                extra_data={"input_line": line_no, "error_type": exc.__class__.__name__, **exc.details},
            )
            print(f"Error: {exc.message}", file=self.stderr, flush=True)
            return False

        for output_line in calculation.lines():
            print(output_line, file=self.stdout)
        self.stdout.flush()
        return True

    def _write_prompt(self) -> None:
        if self.prompt and self.settings.PROMPT:
            self.stdout.write(self.settings.PROMPT)
            self.stdout.flush()
