from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

from .date import DateRange
from .local_paths import NOTE_EXTENSION

DEFAULT_VAULT_DIR = "."
DEFAULT_OUTPUT_FILE = "output.md"


@dataclass(frozen=True)
class DigestConfig:
    """Settings for one digest run. Built once at startup, never mutated."""

    vault_dir: Path
    output_file: Path
    date_range: DateRange
    append: bool = False
    extension: str = NOTE_EXTENSION

    @classmethod
    def from_env(
        cls,
        *,
        vault_dir: str | None = None,
        output_file: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        append: bool = False,
        today: date | None = None,
    ) -> "DigestConfig":
        """Build a config from explicit values, then .env / environment, then defaults.

        VAULT_DIGEST_VAULT_DIR and VAULT_DIGEST_OUTPUT_FILE are read from the
        environment (a .env file is loaded if present). Missing dates default to today.
        """
        load_dotenv()
        vault = vault_dir or os.environ.get("VAULT_DIGEST_VAULT_DIR", "").strip() or DEFAULT_VAULT_DIR
        out = output_file or os.environ.get("VAULT_DIGEST_OUTPUT_FILE", "").strip() or DEFAULT_OUTPUT_FILE

        current = (today or date.today()).isoformat()
        return cls(
            vault_dir=Path(vault),
            output_file=Path(out),
            date_range=DateRange(start=start_date or current, end=end_date or current),
            append=bool(append),
        )
