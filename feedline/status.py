"""Outcome statuses, verbosity levels and colour options."""

from __future__ import annotations

from enum import Enum, IntEnum

from feedline.style import Styled, plain, styled


class Status(IntEnum):
    """Outcome of processing one path, ordered SUCCESS < SKIP < WARN < ERROR."""

    SUCCESS = 0
    SKIP = 1
    WARN = 2
    ERROR = 3

    def colored(self) -> Styled:
        color = {
            Status.SUCCESS: "green",
            Status.SKIP: "yellow",
            Status.WARN: "red",
            Status.ERROR: "red",
        }[self]
        return styled(self.name, color)


class Verbosity(IntEnum):
    """How much output to produce."""

    QUIET = 0
    NORMAL = 1
    VERBOSE = 2

    def colored(self) -> Styled:
        color = {
            Verbosity.QUIET: "blue",
            Verbosity.NORMAL: "green",
            Verbosity.VERBOSE: "red",
        }[self]
        return styled(self.name, color)


class ColorOption(Enum):
    """When to use coloured output."""

    ALWAYS = "always"
    NEVER = "never"
    AUTO = "auto"

    def colored(self) -> Styled:
        if self is ColorOption.ALWAYS:
            return styled(self.name, "green", "bold")
        if self is ColorOption.AUTO:
            return styled(self.name, "blue", "bold")
        return plain(self.name)