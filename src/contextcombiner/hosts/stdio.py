# src/contextcombiner/hosts/stdio.py
import json
import sys
from typing import List, Optional, TextIO

from contextcombiner.ports import MessageHandler

class JsonLinesSurface:
    """
    UISurfacePort over a pair of text streams: one JSON request per input
    line, one JSON message per output line. Host notifications travel as
    {"type": "notification", "level": ..., "message": ...}.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._handlers: List[MessageHandler] = []

    def post_message(self, message: dict) -> None:
        self.stdout.write(json.dumps(message) + "\n")
        self.stdout.flush()

    def on_message(self, handler: MessageHandler) -> None:
        self._handlers.append(handler)

    def show_info(self, text: str) -> None:
        self.post_message({"type": "notification", "level": "info", "message": text})

    def show_error(self, text: str) -> None:
        self.post_message({"type": "notification", "level": "error", "message": text})

    def run(self) -> None:
        """Pump input lines into the handlers until EOF."""
        for line in self.stdin:
            line = line.strip()
            if not line:
                continue
            try:
                message = json.loads(line)
            except json.JSONDecodeError:
                print(f"  > [Warning] Ignoring malformed message: {line[:80]}", file=sys.stderr)
                continue
            for handler in self._handlers:
                try:
                    handler(message)
                except Exception as e:
                    # One failed request must not end the channel.
                    print(f"  > [Warning] Request failed: {e!r}", file=sys.stderr)

class ConsoleSurface:
    """
    In-process surface for the one-shot CLI: keeps posted replies so the
    caller can pick them up, and prints notifications to the terminal.
    """

    def __init__(self):
        self.replies: List[dict] = []
        self.errors: List[str] = []

    def post_message(self, message: dict) -> None:
        self.replies.append(message)

    def on_message(self, handler: MessageHandler) -> None:
        # The CLI drives the session directly.
        pass

    def show_info(self, text: str) -> None:
        print(text)

    def show_error(self, text: str) -> None:
        self.errors.append(text)
        print(f"Error: {text}", file=sys.stderr)

    def take(self, message_type: str) -> Optional[dict]:
        """Removes and returns the oldest reply of the given type."""
        for i, message in enumerate(self.replies):
            if message.get("type") == message_type:
                return self.replies.pop(i)
        return None
