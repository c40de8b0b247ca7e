#!/usr/bin/env python3
"""Collect level-1 sections dated within a range from a markdown vault.

Usage:
  vault-digest --vault-directory ~/notes --output-file digest.md \
    --start-date 2024-01-01 --end-date 2024-01-07

Dates default to today. Without --append the output file is emptied first.
VAULT_DIGEST_VAULT_DIR / VAULT_DIGEST_OUTPUT_FILE (env or .env) set the
default vault and output paths.
"""

from __future__ import annotations

import argparse
import re
from datetime import date

from .config import DigestConfig
from .digest import DigestError, run_digest

CANONICAL_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def canonical_date(s: str) -> str:
    """argparse type: accept "" (meaning today) or a real YYYY-MM-DD date."""
    s = s.strip()
    if not s:
        return s
    if not CANONICAL_DATE_RE.fullmatch(s):
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")
    try:
        date(int(s[:4]), int(s[5:7]), int(s[8:]))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not a calendar date: {s!r} ({e})") from e
    return s


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="vault-digest", description=__doc__.splitlines()[0])
    ap.add_argument("--vault-directory", default=None, help="Vault directory to scan (default: .)")
    ap.add_argument("--output-file", default=None, help="File to write the extracted content (default: output.md)")
    ap.add_argument("--start-date", type=canonical_date, default="", help="Start date, YYYY-MM-DD (default: today)")
    ap.add_argument("--end-date", type=canonical_date, default="", help="End date, YYYY-MM-DD (default: today)")
    ap.add_argument("--append", action="store_true", help="Append to the output file instead of overwriting it")
    return ap


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    cfg = DigestConfig.from_env(
        vault_dir=args.vault_directory,
        output_file=args.output_file,
        start_date=args.start_date or None,
        end_date=args.end_date or None,
        append=args.append,
    )

    try:
        stats = run_digest(cfg)
    except DigestError as e:
        raise SystemExit(str(e))

    print(
        f"DONE: scanned={stats.files_scanned} matched={stats.files_matched} "
        f"sections={stats.sections_written} failed={stats.files_failed}"
    )


if __name__ == "__main__":
    main()
