"""Collect date-headed sections from a tree of markdown notes into one digest file."""

from .capture import CapturedSection, capture_sections, render_sections
from .date import DateRange, HeaderLine, extract_date
