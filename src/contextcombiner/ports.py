# src/contextcombiner/ports.py
# Capabilities the core expects from whichever host it runs under.
from pathlib import Path
from typing import Callable, Iterable, Protocol, Sequence


class FileSystemPort(Protocol):
    """Recursive listing plus text read/write."""

    def list_files(
        self,
        root: Path,
        include: str,
        exclude: Sequence[str],
    ) -> Iterable[Path]:
        """Yield absolute paths of files under *root* matching *include* and none of *exclude*."""
        ...

    def read_text(self, path: Path) -> str:
        ...

    def write_text(self, path: Path, content: str) -> None:
        ...


class ClipboardPort(Protocol):
    def write(self, text: str) -> None:
        ...


MessageHandler = Callable[[dict], None]


class UISurfacePort(Protocol):
    """Message channel to the panel plus the host's notification area."""

    def post_message(self, message: dict) -> None:
        ...

    def on_message(self, handler: MessageHandler) -> None:
        ...

    def show_info(self, text: str) -> None:
        ...

    def show_error(self, text: str) -> None:
        ...
