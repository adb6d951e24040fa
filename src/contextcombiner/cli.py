# src/contextcombiner/cli.py
import sys
import argparse
import os
from pathlib import Path

from contextcombiner.core.aggregator import compose_aggregate
from contextcombiner.core.reader import READ_ERROR_PREFIX
from contextcombiner.core.tree import render_catalog_tree
from contextcombiner.hosts.local import LocalFileSystem, PyperclipClipboard
from contextcombiner.hosts.stdio import ConsoleSurface, JsonLinesSurface
from contextcombiner.models import FileEntry
from contextcombiner.session import CombinerSession
from contextcombiner.utils.tokenizer import estimate_tokens

def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog="context-combiner",
        description="Pick files from a project and combine them into one context blob for an LLM prompt.",
    )
    parser.add_argument("root_dir", type=str, nargs="?", default=os.getcwd(), help="Workspace root directory")
    parser.add_argument(
        "-s", "--select",
        nargs="+",
        metavar="PATH",
        default=None,
        help="Workspace-relative files to combine, in order",
    )
    parser.add_argument("--all", action="store_true", help="Combine every catalogued file")
    parser.add_argument("--copy", action="store_true", help="Copy to the clipboard instead of saving")
    parser.add_argument(
        "-x", "--exclude",
        action="append",
        metavar="PATTERN",
        default=[],
        help="Extra gitignore-style exclude pattern (repeatable)",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Speak the panel message protocol as JSON lines over stdin/stdout",
    )
    return parser

def serve(root_dir: Path, exclude):
    surface = JsonLinesSurface()
    session = CombinerSession(root_dir, LocalFileSystem(), PyperclipClipboard(), surface, exclude)
    session.attach()
    surface.run()

def main():
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args()

        root_dir = Path(args.root_dir).resolve()
        if not root_dir.is_dir():
            print(f"Error: Invalid directory '{root_dir}'", file=sys.stderr)
            sys.exit(1)

        if args.serve:
            serve(root_dir, args.exclude)
            return

        print(f"--- context-combiner ---")
        print(f"Scanning: {root_dir}")

        surface = ConsoleSurface()
        session = CombinerSession(root_dir, LocalFileSystem(), PyperclipClipboard(), surface, args.exclude)

        # 2. Catalog
        session.handle({"type": "getFiles"})
        file_list = surface.take("fileList")
        if file_list is None:
            sys.exit(1)

        entries = [FileEntry(rel_path=f["path"], abs_path=Path(f["fullPath"])) for f in file_list["files"]]

        if not args.select and not args.all:
            if not entries:
                print("No matching files found.")
                return
            print()
            print(render_catalog_tree(entries, root_dir.name), end="")
            print("-" * 60)
            print(f"Total files: {len(entries)}")
            return

        # 3. Read the selection
        selection = [e.rel_path for e in entries] if args.all else args.select
        known = {e.rel_path for e in entries}

        sections = []
        for rel_path in selection:
            if rel_path not in known:
                print(f"  > [Warning] {rel_path} is not in the catalog", file=sys.stderr)
            session.handle({"type": "readFile", "path": rel_path})
            reply = surface.take("fileContent")
            if reply["content"].startswith(READ_ERROR_PREFIX):
                print(f"  > [Warning] {reply['content']} ({rel_path})", file=sys.stderr)
            sections.append((reply["path"], reply["content"]))

        if not sections:
            print("No matching files found.")
            return

        # 4. Combine & deliver
        combined = compose_aggregate(sections)
        print(f"Selected: {len({p for p, _ in sections})} files | Tokens: ~{estimate_tokens(combined)}")

        action = "copyToClipboard" if args.copy else "saveFile"
        session.handle({"type": action, "content": combined})
        if surface.errors:
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
