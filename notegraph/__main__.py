from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from notegraph.core.errors import NoteGraphError
from notegraph.logging_setup import SESSION_ID, install_global_exception_hooks, setup_logging
from notegraph.services.session import NoteSession
from notegraph.vault.fs_store import FsNoteStore


def positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1: {value}")
    return n


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="notegraph", description="Print the wiki-link graph of a vault as JSON.")
    p.add_argument("vault", type=Path, help="directory of .md notes")
    p.add_argument("--center", help="only the neighbourhood of this title")
    p.add_argument("--depth", type=positive_int, default=1, help="hops around --center (default: 1)")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    log = setup_logging(console=False)
    install_global_exception_hooks(log)

    if not args.vault.is_dir():
        print(f"not a directory: {args.vault}", file=sys.stderr)
        return 2

    session = NoteSession(FsNoteStore(args.vault))
    try:
        graph = session.refresh_graph()
    except NoteGraphError as e:
        log.error("Graph build failed: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.center:
        graph = graph.neighbourhood(args.center, args.depth)

    log.info("Graph printed for %s, SID=%s", args.vault, SESSION_ID)
    json.dump(graph.to_payload(), sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
