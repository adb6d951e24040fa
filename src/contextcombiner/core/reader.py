# src/contextcombiner/core/reader.py
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Optional

from contextcombiner.errors import FileReadError
from contextcombiner.ports import FileSystemPort

READ_ERROR_PREFIX = "[Error reading file:"

def resolve_in_root(root: Path, rel_path: str) -> Path:
    """
    Joins rel_path onto root and checks the result does not escape it.
    Symlinks are followed before the check.
    """
    if not rel_path or PurePosixPath(rel_path).is_absolute() or PureWindowsPath(rel_path).is_absolute():
        raise FileReadError(f"'{rel_path}' is not a workspace-relative path")

    root_resolved = root.resolve()
    target = (root_resolved / rel_path).resolve()
    try:
        target.relative_to(root_resolved)
    except ValueError:
        raise FileReadError(f"'{rel_path}' resolves outside the workspace root") from None
    return target

def read_file_content(root: Optional[Path], rel_path: str, fs: FileSystemPort) -> str:
    """
    Returns the UTF-8 text of a workspace file.

    Never raises: any failure comes back as "[Error reading file: <message>]"
    so one bad file does not abort a batch of reads.
    """
    try:
        if root is None:
            raise FileReadError("No workspace folder open")
        target = resolve_in_root(root, rel_path)
        return fs.read_text(target)
    except (FileReadError, OSError, UnicodeDecodeError, ValueError) as e:
        return f"{READ_ERROR_PREFIX} {e}]"
