"""Application pagination – PageRange."""
from __future__ import annotations

import dataclasses
import re

EMPTY_END_INDEX = -1
"""End index the server reports for a page without entities."""

_CONTENT_RANGE = re.compile(r"items\s+(\d+)-(-?\d+)/(\d+)", re.IGNORECASE)


@dataclasses.dataclass(frozen=True, slots=True)
class PageRange:
    """Loaded window ``[start_index, end_index]`` (inclusive) of a larger result.

    ``total_count`` is the size of the whole result as if no limit were set.
    """

    start_index: int
    end_index: int
    total_count: int

    @property
    def is_empty(self) -> bool:
        return self.end_index == EMPTY_END_INDEX

    @property
    def loaded_count(self) -> int:
        if self.is_empty:
            return 0
        return self.end_index - self.start_index + 1

    def contains(self, position: int) -> bool:
        """True if *position* lies within the loaded window."""
        return self.start_index <= position <= self.end_index

    def matches(self, item_count: int) -> bool:
        """True if *item_count* loaded items agree with this range.

        An empty-result range (``end_index == -1``) matches any count.
        """
        return self.end_index - self.start_index + 1 == item_count or self.is_empty

    @classmethod
    def from_content_range(cls, header: str) -> "PageRange | None":
        """Parse a ``Content-Range: items <start>-<end>/<total>`` header value.

        Returns ``None`` when *header* does not follow that convention.
        """
        match = _CONTENT_RANGE.search(header)
        if match is None:
            return None
        return cls(int(match.group(1)), int(match.group(2)), int(match.group(3)))


__all__ = ["EMPTY_END_INDEX", "PageRange"]
