"""
Read-eval-print driver for Skate.

The driver owns all I/O: it pulls one line at a time from `input_fn`,
evaluates it with an Interpreter, and pushes the rendering of the result
(or of the error) to `output_fn`. Errors end the current line only.

Driver commands (not Lisp):
- :quit, :q  stop the loop
"""

from __future__ import annotations

import logging
from typing import Callable

from skate.config import get_prompt
from skate.debug_utils.pprint import format_error, format_expr
from skate.errors import ExitRequested, SkateError
from skate.interpreter import Interpreter

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {":quit", ":q"}


class Repl:
    def __init__(
        self,
        interpreter: Interpreter | None = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        prompt: str | None = None,
        color: bool = False,
    ):
        self.interp = interpreter if interpreter is not None else Interpreter()
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.prompt = prompt if prompt is not None else get_prompt()
        self.color = color

    def step(self, line: str) -> str | None:
        """Evaluate one line and return its rendering (None for a blank line)."""
        if not line.strip():
            return None
        try:
            return format_expr(self.interp.eval(line), self.color)
        except SkateError as ex:
            logger.info("%s: %s", type(ex).__name__, ex)
            return format_error(ex, self.color)

    def run(self) -> int:
        """Loop until end of input, a quit command or (exit). Returns the exit status."""
        logger.info("repl started")
        status = 0
        while True:
            try:
                line = self.input_fn(self.prompt)
            except EOFError:
                break
            except KeyboardInterrupt:
                self.output_fn("")
                continue
            if line.strip() in QUIT_COMMANDS:
                break
            try:
                out = self.step(line)
            except ExitRequested as ex:
                status = ex.status
                break
            except KeyboardInterrupt:
                self.output_fn("Interrupted")
                continue
            if out is not None:
                self.output_fn(out)
        logger.info("repl stopped with status %d", status)
        return status
