from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

NOTE_EXTENSION = ".md"


def same_path(a: Path, b: Path) -> bool:
    """Return True if a and b name the same file once normalized.

    Both paths are made absolute and resolved, so "output.md" and
    "./notes/../output.md" compare equal. Never raises: a path that cannot be
    resolved (symlink loop) falls back to lexical comparison.
    """
    return _normalized(a) == _normalized(b)


def _normalized(p: Path) -> str:
    p = p.expanduser()
    try:
        return str(p.resolve())
    except (OSError, RuntimeError):
        # RuntimeError: symlink loop on Python < 3.13
        return os.path.abspath(os.path.normpath(p))


def document_id(path: Path, *, extension: str = NOTE_EXTENSION) -> str:
    """The label used for a note's blocks: its path without the extension."""
    s = str(path)
    if extension and s.endswith(extension):
        return s[: -len(extension)]
    return s


def iter_note_files(
    root: Path,
    *,
    exclude: Path | None = None,
    extension: str = NOTE_EXTENSION,
) -> Iterator[Path]:
    """Yield note files under root, depth-first in lexical name order.

    Symlinked directories below root are not followed. A root that is itself
    a note file is yielded as-is. Listing errors propagate as OSError; callers
    decide whether that is fatal.
    """
    root = Path(os.path.normpath(root))

    def _wanted(p: Path) -> bool:
        if not p.name.endswith(extension):
            return False
        return exclude is None or not same_path(p, exclude)

    if not root.is_dir():
        if not root.exists():
            raise FileNotFoundError(f"No such file or directory: {root}")
        if _wanted(root):
            yield root
        return

    def _walk(d: Path) -> Iterator[Path]:
        for p in sorted(d.iterdir(), key=lambda x: x.name):
            if p.is_dir() and not p.is_symlink():
                yield from _walk(p)
            elif _wanted(p):
                yield p

    yield from _walk(root)
