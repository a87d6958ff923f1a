"""Verbosity-aware output to standard output and standard error."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from feedline.status import ColorOption, Verbosity
from feedline.style import Styled, plain


class Printer:
    """Writes space-joined message parts, honouring colour and verbosity."""

    def __init__(
        self,
        color_option: ColorOption,
        verbosity: Verbosity,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.verbosity_level = verbosity
        if color_option is ColorOption.AUTO:
            self.use_color = bool(getattr(self.stdout, "isatty", lambda: False)())
        else:
            self.use_color = color_option is ColorOption.ALWAYS

    def _write(self, stream: TextIO, parts: Iterable[Styled | str], verbosity: Verbosity) -> None:
        if verbosity > self.verbosity_level:
            return
        line = " ".join(
            (plain(part) if isinstance(part, str) else part).render(self.use_color)
            for part in parts
        )
        print(line, file=stream)

    def print(self, parts: Iterable[Styled | str], verbosity: Verbosity) -> None:
        """Write to standard output if ``verbosity`` is within the level."""
        self._write(self.stdout, parts, verbosity)

    def eprint(self, parts: Iterable[Styled | str], verbosity: Verbosity) -> None:
        """Write to standard error if ``verbosity`` is within the level."""
        self._write(self.stderr, parts, verbosity)