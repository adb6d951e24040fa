# src/contextcombiner/hosts/local.py
import os
import sys
from pathlib import Path
from typing import Iterator, Sequence

import pyperclip

from contextcombiner.core.ignore import build_spec
from contextcombiner.errors import ClipboardError, FileSystemError

class LocalFileSystem:
    """FileSystemPort over the local disk."""

    def list_files(self, root: Path, include: str, exclude: Sequence[str]) -> Iterator[Path]:
        if not root.is_dir():
            raise FileSystemError(f"Workspace root '{root}' is not a directory")

        include_spec = build_spec([include])
        exclude_spec = build_spec(exclude)

        def _on_error(err: OSError):
            if err.filename is not None and Path(err.filename) == root:
                raise FileSystemError(f"Could not scan '{root}': {err}") from err
            print(f"  > [Warning] Skipping {err.filename} ({err.strerror})", file=sys.stderr)

        for current, dirs, files in os.walk(root, onerror=_on_error):
            current_path = Path(current)

            # Pruning dirs in place keeps os.walk out of excluded trees.
            for d in list(dirs):
                dir_rel = (current_path / d).relative_to(root).as_posix()
                if exclude_spec.match_file(f"{dir_rel}/"):
                    dirs.remove(d)

            for f in files:
                file_abs = current_path / f
                rel = file_abs.relative_to(root).as_posix()
                if not include_spec.match_file(rel) or exclude_spec.match_file(rel):
                    continue
                yield file_abs

    def read_text(self, path: Path) -> str:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()

    def write_text(self, path: Path, content: str) -> None:
        # Encode up front so unencodable text never leaves a half-written file.
        data = content.encode("utf-8")
        with open(path, "wb") as f:
            f.write(data)

class PyperclipClipboard:
    """ClipboardPort backed by the system clipboard."""

    def write(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"Clipboard unavailable: {e}") from e
