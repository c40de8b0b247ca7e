from __future__ import annotations

from dataclasses import dataclass

HEADER_MARKER = "#"


@dataclass(frozen=True)
class HeaderLine:
    """A raw line that starts a top-level section ("# " prefix)."""

    raw: str

    @property
    def title(self) -> str:
        return self.raw.lstrip(HEADER_MARKER).strip()


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of canonical YYYY-MM-DD dates.

    Bounds are compared as strings; an inverted range is allowed and matches nothing.
    """

    start: str
    end: str

    def __contains__(self, day: object) -> bool:
        if not isinstance(day, str):
            return False
        return self.start <= day <= self.end

    @classmethod
    def single_day(cls, day: str) -> "DateRange":
        return cls(start=day, end=day)
