"""Text fragments that can be rendered with or without ANSI colour codes."""

from __future__ import annotations

from dataclasses import dataclass

_STYLE_CODES = {"bold": "1", "dimmed": "2", "italic": "3", "underline": "4"}
_COLOR_CODES = {
    "black": "30",
    "red": "31",
    "green": "32",
    "yellow": "33",
    "blue": "34",
    "magenta": "35",
    "cyan": "36",
    "white": "37",
}
_RESET = "\x1b[0m"


@dataclass(frozen=True)
class Styled:
    """A piece of text together with the terminal styles applied to it."""

    text: str
    styles: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        unknown = [
            name
            for name in self.styles
            if name not in _STYLE_CODES and name not in _COLOR_CODES
        ]
        if unknown:
            raise ValueError(f"unknown style: {', '.join(unknown)}")

    def _codes(self) -> list[str]:
        codes = [code for name, code in _STYLE_CODES.items() if name in self.styles]
        colors = [name for name in self.styles if name in _COLOR_CODES]
        if colors:
            codes.append(_COLOR_CODES[colors[-1]])
        return codes

    def render(self, use_color: bool) -> str:
        """Return the text, wrapped in escape codes when colour is wanted."""
        codes = self._codes()
        if not use_color or not codes:
            return self.text
        return f"\x1b[{';'.join(codes)}m{self.text}{_RESET}"

    def __str__(self) -> str:
        return self.text


def plain(text: str) -> Styled:
    """Text with no styling."""
    return Styled(text)


def styled(text: str, *args: str) -> Styled:
    """Text with the given styles, e.g. ``styled("OK", "green", "bold")``."""
    return Styled(text, tuple(args))