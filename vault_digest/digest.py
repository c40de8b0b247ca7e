"""Run loop: scan the vault, capture dated sections, append them to the output file.

Documents are handled strictly one after another so the output keeps traversal
order, then line order within each document.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .capture import capture_sections, render_sections
from .config import DigestConfig
from .local_paths import document_id, iter_note_files

# Undecodable bytes survive the round trip unchanged.
ENCODING = "utf-8"
ERRORS = "surrogateescape"


class DigestError(RuntimeError):
    """A failure that aborts the whole run."""


class TraversalError(DigestError):
    pass


class OutputError(DigestError):
    pass


@dataclass
class DigestStats:
    files_scanned: int = 0
    files_matched: int = 0
    sections_written: int = 0
    files_failed: int = 0


def truncate_output(output_file: Path) -> None:
    try:
        output_file.write_bytes(b"")
    except OSError as e:
        raise OutputError(f"Error truncating output file: {e}") from e


def append_output(output_file: Path, chunk: str) -> None:
    with output_file.open("a", encoding=ENCODING, errors=ERRORS, newline="") as f:
        f.write(chunk)


def read_lines(path: Path) -> list[str]:
    # Split on "\n" only: "\r" stays on its line and a trailing newline yields a final "".
    return path.read_bytes().decode(ENCODING, errors=ERRORS).split("\n")


def process_note(path: Path, cfg: DigestConfig) -> int:
    """Capture one note's matching sections and append them. Returns the section count.

    Failures are reported on stderr and the note is skipped (returns -1); nothing
    is raised for a single bad file.
    """
    try:
        lines = read_lines(path)
    except OSError as e:
        print(f"ERROR: reading file {path}: {e}", file=sys.stderr)
        return -1

    sections = capture_sections(document_id(path, extension=cfg.extension), lines, cfg.date_range)
    for s in sections:
        print(f"Match found in file {path}: {s.header}")

    chunk = render_sections(sections)
    if not chunk:
        return 0

    try:
        append_output(cfg.output_file, chunk)
    except OSError as e:
        print(f"ERROR: writing to output file {cfg.output_file}: {e}", file=sys.stderr)
        return -1

    print(f"OK: wrote {len(sections)} section(s) from {path}")
    return len(sections)


def _walk_notes(cfg: DigestConfig) -> Iterator[Path]:
    """iter_note_files, with listing errors raised as TraversalError."""
    try:
        yield from iter_note_files(cfg.vault_dir, exclude=cfg.output_file, extension=cfg.extension)
    except OSError as e:
        raise TraversalError(f"Error while scanning directory: {e}") from e


def run_digest(cfg: DigestConfig) -> DigestStats:
    """Scan cfg.vault_dir and write the digest to cfg.output_file.

    Raises OutputError if the output cannot be truncated (nothing is scanned),
    TraversalError if a directory cannot be listed (the run stops there).
    """
    if not cfg.append:
        truncate_output(cfg.output_file)

    r = cfg.date_range
    print(f"Scanning for Markdown files with level 1 headers matching date range: {r.start} to {r.end}")

    stats = DigestStats()
    for path in _walk_notes(cfg):
        stats.files_scanned += 1
        n = process_note(path, cfg)
        if n < 0:
            stats.files_failed += 1
        elif n:
            stats.files_matched += 1
            stats.sections_written += n

    return stats
