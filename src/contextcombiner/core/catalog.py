# src/contextcombiner/core/catalog.py
from pathlib import Path, PurePosixPath
from typing import List, Optional

from contextcombiner.config import EXCLUDED_DIRS, INCLUDE_PATTERN, TEXT_EXTENSIONS
from contextcombiner.core.ignore import build_spec, exclude_patterns
from contextcombiner.errors import FileSystemError
from contextcombiner.models import FileEntry
from contextcombiner.ports import FileSystemPort

def is_text_file(rel_path: str) -> bool:
    """Known text extension (case-insensitive), or no extension at all."""
    suffix = PurePosixPath(rel_path).suffix.lower()
    return not suffix or suffix in TEXT_EXTENSIONS

def is_under_excluded_dir(rel_path: str) -> bool:
    """True if any directory segment (not the file name) is an excluded directory."""
    return any(part in EXCLUDED_DIRS for part in PurePosixPath(rel_path).parts[:-1])

def list_text_files(
    root: Optional[Path],
    fs: FileSystemPort,
    extra_patterns: Optional[List[str]] = None,
) -> List[FileEntry]:
    """
    Re-scans the workspace and returns every catalogued text file.
    No workspace yields an empty list; a failed scan raises FileSystemError.
    """
    if root is None:
        return []

    patterns = exclude_patterns(root, extra_patterns)
    # The port applies the same globs, but a looser host must not leak excluded files.
    spec = build_spec(patterns)

    try:
        found = list(fs.list_files(root, INCLUDE_PATTERN, patterns))
    except OSError as e:
        raise FileSystemError(f"Could not scan '{root}': {e}") from e

    entries: List[FileEntry] = []
    for abs_path in found:
        try:
            rel_path = abs_path.relative_to(root).as_posix()
        except ValueError:
            continue

        if is_under_excluded_dir(rel_path) or spec.match_file(rel_path):
            continue
        if not is_text_file(rel_path):
            continue

        entries.append(FileEntry(rel_path=rel_path, abs_path=abs_path))

    entries.sort(key=lambda e: e.rel_path)
    return entries
