"""Single-pass section capture over one document's lines.

Two states, idle and capturing. Only top-level header lines change state: a
header whose date falls in the range opens a new section, any other header
closes the current one. Other lines are copied verbatim while capturing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .date import DateRange, extract_date
from .date.types import HEADER_MARKER

HEADER_PREFIX = HEADER_MARKER + " "


@dataclass
class CapturedSection:
    doc_id: str
    header: str  # the matching header line, used for progress messages only
    date: str
    lines: list[str] = field(default_factory=list)

    def render(self) -> str:
        """Synthetic title naming the document, then the captured lines."""
        out = [f"{HEADER_PREFIX}{self.doc_id}\n"]
        out.extend(ln + "\n" for ln in self.lines)
        return "".join(out)


def is_top_level_header(line: str) -> bool:
    return line.startswith(HEADER_PREFIX)


def capture_sections(doc_id: str, lines: Iterable[str], date_range: DateRange) -> list[CapturedSection]:
    sections: list[CapturedSection] = []
    current: CapturedSection | None = None

    for line in lines:
        if is_top_level_header(line):
            d = extract_date(line)
            if d is not None and d in date_range:
                current = CapturedSection(doc_id=doc_id, header=line, date=d)
                sections.append(current)
            else:
                current = None
        elif current is not None:
            current.lines.append(line)

    return sections


def render_sections(sections: list[CapturedSection]) -> str:
    """Render one document's sections as a single output chunk.

    Returns "" when nothing matched; otherwise the blocks followed by one blank
    separator line.
    """
    body = "".join(s.render() for s in sections)
    if not body:
        return ""
    return body + "\n"
