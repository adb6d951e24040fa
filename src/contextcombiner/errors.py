# src/contextcombiner/errors.py

class ContextCombinerError(Exception):
    """Base exception for context-combiner errors."""


class FileSystemError(ContextCombinerError):
    """Raised when the workspace cannot be enumerated."""


class FileReadError(ContextCombinerError):
    """Raised when a single workspace file cannot be read."""


class PersistenceError(ContextCombinerError):
    """Raised when the combined context cannot be written."""


class ClipboardError(ContextCombinerError):
    """Raised when the clipboard rejects the combined context."""
