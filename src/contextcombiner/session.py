# src/contextcombiner/session.py
import secrets
import string
from pathlib import Path
from typing import Callable, Dict, List, Optional

from contextcombiner.config import NONCE_LENGTH
from contextcombiner.core.aggregator import copy_to_clipboard, save_aggregate
from contextcombiner.core.catalog import list_text_files
from contextcombiner.core.reader import read_file_content
from contextcombiner.errors import ClipboardError, FileSystemError, PersistenceError
from contextcombiner.ports import ClipboardPort, FileSystemPort, UISurfacePort

_NONCE_ALPHABET = string.ascii_letters + string.digits


def new_nonce(length: int = NONCE_LENGTH) -> str:
    """Random token for a panel's content-security-policy header."""
    return "".join(secrets.choice(_NONCE_ALPHABET) for _ in range(length))


class CombinerSession:
    """
    Routes panel messages to the catalog, reader and aggregator.
    Holds only the workspace root, exclude options and host ports; per-request
    state stays in handler locals.
    """

    def __init__(
        self,
        root: Optional[Path],
        fs: FileSystemPort,
        clipboard: ClipboardPort,
        surface: UISurfacePort,
        extra_patterns: Optional[List[str]] = None,
    ) -> None:
        self.root = root
        self.fs = fs
        self.clipboard = clipboard
        self.surface = surface
        self.extra_patterns = list(extra_patterns or [])
        self._handlers: Dict[str, Callable[[dict], None]] = {
            "getFiles": self._on_get_files,
            "readFile": self._on_read_file,
            "saveFile": self._on_save_file,
            "copyToClipboard": self._on_copy,
        }

    def attach(self) -> None:
        """Subscribe to the surface and push the initial file list."""
        self.surface.on_message(self.handle)
        self.send_file_list()

    def refresh(self) -> None:
        self.send_file_list()

    def handle(self, message: dict) -> None:
        """Dispatch one inbound message. Unknown types are ignored."""
        if not isinstance(message, dict) or not isinstance(message.get("type"), str):
            return
        handler = self._handlers.get(message["type"])
        if handler is not None:
            handler(message)

    def send_file_list(self) -> None:
        try:
            entries = list_text_files(self.root, self.fs, self.extra_patterns)
        except FileSystemError as e:
            self.surface.show_error(f"Failed to load files: {e}")
            return

        self.surface.post_message({
            "type": "fileList",
            "files": [entry.to_message() for entry in entries],
        })

    def _on_get_files(self, message: dict) -> None:
        self.send_file_list()

    def _on_read_file(self, message: dict) -> None:
        if self.root is None:
            return
        rel_path = message.get("path")
        if not isinstance(rel_path, str):
            rel_path = ""
        content = read_file_content(self.root, rel_path, self.fs)
        self.surface.post_message({
            "type": "fileContent",
            "path": rel_path,
            "content": content,
        })

    def _on_save_file(self, message: dict) -> None:
        if self.root is None:
            self.surface.show_error("No workspace folder open")
            return
        content = message.get("content")
        if not isinstance(content, str):
            self.surface.show_error("Failed to save file: no content to save")
            return
        try:
            artifact = save_aggregate(self.root, content, self.fs)
        except PersistenceError as e:
            self.surface.show_error(f"Failed to save file: {e}")
            return
        self.surface.show_info(f"Saved to {artifact.name}")

    def _on_copy(self, message: dict) -> None:
        content = message.get("content")
        if not isinstance(content, str):
            self.surface.show_error("Failed to copy: no content to copy")
            return
        try:
            copy_to_clipboard(content, self.clipboard)
        except ClipboardError as e:
            self.surface.show_error(f"Failed to copy: {e}")
            return
        self.surface.show_info("Content copied to clipboard!")
