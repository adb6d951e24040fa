# src/contextcombiner/models.py
from dataclasses import dataclass
from pathlib import Path

@dataclass(frozen=True)
class FileEntry:
    """One catalogued workspace file."""
    rel_path: str
    abs_path: Path

    def to_message(self) -> dict:
        return {"path": self.rel_path, "fullPath": str(self.abs_path)}

@dataclass(frozen=True)
class SavedArtifact:
    """A combined-context file written into the workspace root."""
    name: str
    path: Path
