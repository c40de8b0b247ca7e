"""Date extraction for top-level note headers.

Only the whole header title is considered: "# January 2, 2024" has a date,
"# Standup, January 2, 2024" does not.
"""

from .types import DateRange, HeaderLine
from .parsers import extract_date, strip_ordinals
