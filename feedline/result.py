"""The outcome of ensuring a trailing newline on one path."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from feedline.status import Status
from feedline.style import Styled, plain, styled


@total_ordering
@dataclass(frozen=True)
class FeedlineResult:
    """Result for one path; sorts by status, then file, then message."""

    status: Status
    file: str
    message: str | None = None

    def _key(self) -> tuple:
        return (self.status, self.file, self.message is not None, self.message or "")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FeedlineResult):
            return NotImplemented
        return self._key() < other._key()

    def message_parts(self) -> list[Styled]:
        """The pieces of the report line for this result."""
        parts = [self.status.colored(), plain(self.file)]
        if self.message is not None:
            parts.append(styled(self.message, "dimmed"))
        return parts