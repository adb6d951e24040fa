# src/contextcombiner/config.py

# Directory names that are never catalogued, at any depth.
EXCLUDED_DIRS = frozenset({
    "node_modules",
    ".git",
    "dist",
    "build",
    ".vscode",
    "out",
})

# Same set in gitwildmatch form, handed to the file-listing primitive.
DEFAULT_EXCLUDE_PATTERNS = [f"{d}/" for d in sorted(EXCLUDED_DIRS)]

INCLUDE_PATTERN = "**/*"

# Files without an extension are always treated as text.
TEXT_EXTENSIONS = frozenset({
    ".js", ".jsx", ".ts", ".tsx", ".json", ".html", ".css", ".scss", ".sass",
    ".md", ".txt", ".py", ".java", ".c", ".cpp", ".h", ".cs", ".php", ".rb",
    ".go", ".rs", ".swift", ".kt", ".dart", ".vue", ".svelte", ".xml", ".yaml",
    ".yml", ".toml", ".ini", ".cfg", ".conf", ".sh", ".bash", ".sql", ".r",
    ".m", ".scala", ".clj", ".ex", ".exs", ".erl", ".hs", ".lua", ".pl", ".pm",
})

ARTIFACT_PREFIX = "context_"
ARTIFACT_SUFFIX = ".txt"

# Optional per-workspace exclude rules (gitwildmatch syntax).
IGNORE_FILE_NAME = ".contextignore"

NONCE_LENGTH = 32
