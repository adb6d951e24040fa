# src/contextcombiner/core/ignore.py
from pathlib import Path
from typing import Iterable, List, Optional
import pathspec

from contextcombiner.config import DEFAULT_EXCLUDE_PATTERNS, IGNORE_FILE_NAME
from contextcombiner.errors import FileSystemError

def build_spec(patterns: Iterable[str]) -> pathspec.PathSpec:
    """Compiles gitignore-style patterns, skipping blanks and comments."""
    lines = [p.strip() for p in patterns]
    lines = [p for p in lines if p and not p.startswith("#")]
    return pathspec.GitIgnoreSpec.from_lines(lines)

def read_ignore_file(root_dir: Path) -> List[str]:
    """
    Returns the patterns listed in the workspace's .contextignore, if any.
    A missing file simply contributes nothing.
    """
    ignore_file = root_dir / IGNORE_FILE_NAME
    if not ignore_file.is_file():
        return []

    try:
        with open(ignore_file, "r", encoding="utf-8") as f:
            return f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise FileSystemError(f"Could not read {IGNORE_FILE_NAME}: {e}") from e

def exclude_patterns(root_dir: Path, extra_patterns: Optional[List[str]] = None) -> List[str]:
    """
    Full exclude list for a scan: the built-in directories, then the
    workspace's .contextignore, then any patterns supplied at runtime.
    """
    patterns = list(DEFAULT_EXCLUDE_PATTERNS)
    patterns.extend(read_ignore_file(root_dir))

    if extra_patterns:
        patterns.extend(extra_patterns)

    return patterns
