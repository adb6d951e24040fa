# src/contextcombiner/core/tree.py
from typing import Dict, Iterable
from pathlib import PurePosixPath

from contextcombiner.models import FileEntry

def render_catalog_tree(entries: Iterable[FileEntry], root_name: str) -> str:
    """Draws the catalogued files as a tree, directories before files."""
    tree_dict: Dict = {}
    for entry in entries:
        *dirs, leaf = PurePosixPath(entry.rel_path).parts
        node = tree_dict
        for part in dirs:
            node = node.setdefault(part, {})
        node.setdefault(leaf, None)

    lines = [f"{root_name}/"]

    def _walk(subtree: Dict, prefix: str):
        entries_sorted = sorted(subtree.items(), key=lambda kv: (kv[1] is None, kv[0]))
        for i, (name, child) in enumerate(entries_sorted):
            is_last = (i == len(entries_sorted) - 1)
            connector = "└── " if is_last else "├── "
            suffix = "/" if child is not None else ""
            lines.append(f"{prefix}{connector}{name}{suffix}")

            if child is not None:
                _walk(child, prefix + ("    " if is_last else "│   "))

    _walk(tree_dict, "")
    return "\n".join(lines) + "\n"
