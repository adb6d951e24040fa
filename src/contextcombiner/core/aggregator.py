# src/contextcombiner/core/aggregator.py
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Optional, Tuple

from contextcombiner.config import ARTIFACT_PREFIX, ARTIFACT_SUFFIX
from contextcombiner.errors import PersistenceError
from contextcombiner.models import SavedArtifact
from contextcombiner.ports import ClipboardPort, FileSystemPort

def artifact_timestamp(now: Optional[datetime] = None) -> str:
    """UTC ISO-8601 time with ':' and '.' swapped for '-', cut to whole seconds."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime("%Y-%m-%dT%H-%M-%S")

def artifact_name(now: Optional[datetime] = None) -> str:
    return f"{ARTIFACT_PREFIX}{artifact_timestamp(now)}{ARTIFACT_SUFFIX}"

def save_aggregate(
    root: Optional[Path],
    content: str,
    fs: FileSystemPort,
    now: Optional[datetime] = None,
) -> SavedArtifact:
    """
    Writes content verbatim to <root>/context_<timestamp>.txt.
    A second save within the same second overwrites the first.
    """
    if root is None:
        raise PersistenceError("No workspace folder open")

    name = artifact_name(now)
    path = root / name
    try:
        fs.write_text(path, content)
    except (OSError, UnicodeError) as e:
        raise PersistenceError(f"Could not write '{name}': {e}") from e

    return SavedArtifact(name=name, path=path)

def copy_to_clipboard(content: str, clipboard: ClipboardPort) -> None:
    clipboard.write(content)

def compose_aggregate(sections: Iterable[Tuple[str, str]]) -> str:
    """
    Joins (rel_path, content) pairs the way the panel does:
    an "=== path ===" header over each file, in the given order.
    Repeated paths keep only their first occurrence.
    """
    seen = set()
    parts = []
    for rel_path, content in sections:
        if rel_path in seen:
            continue
        seen.add(rel_path)
        parts.append(f"=== {rel_path} ===\n{content}\n")
    return "\n".join(parts)
