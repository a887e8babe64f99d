from __future__ import annotations

import os
import uuid
from dataclasses import dataclass
from pathlib import Path

from notegraph.core.errors import InvalidTitle, NoteAlreadyExists, NoteNotFound, StoreError
from notegraph.core.filenames import is_safe_title
from notegraph.vault.store import NoteListing, default_note_text

NOTE_SUFFIX = ".md"


def atomic_write_text(path: Path, text: str, *, encoding: str = "utf-8") -> None:
    """
    Atomic-ish file write:
    - write to temp file in same directory
    - fsync
    - replace()
    """
    path = Path(path)
    tmp_path = path.parent / f".{path.name}.tmp-{uuid.uuid4().hex}"
    try:
        with open(tmp_path, "w", encoding=encoding, newline="") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()


@dataclass(frozen=True)
class FsNoteStore:
    """A directory of `<title>.md` files."""

    vault_dir: Path

    def ensure(self) -> None:
        self.vault_dir.mkdir(parents=True, exist_ok=True)

    def note_path(self, title: str) -> Path:
        if not is_safe_title(title):
            raise InvalidTitle(title, "title is not a valid file name")
        return self.vault_dir / f"{title}{NOTE_SUFFIX}"

    def list_notes(self) -> list[NoteListing]:
        paths = sorted(self.vault_dir.glob(f"*{NOTE_SUFFIX}"), key=lambda p: p.stem)
        return [NoteListing(p.stem, p.is_file()) for p in paths]

    def read_note(self, title: str) -> str:
        path = self.note_path(title)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise NoteNotFound(title) from None
        except OSError as e:
            raise StoreError(title, f"cannot read {path}: {e}") from e

    def create_note(self, title: str) -> None:
        path = self.note_path(title)
        try:
            # "x" fails if the file exists, so two creators cannot both win.
            with open(path, "x", encoding="utf-8", newline="") as f:
                f.write(default_note_text(title))
        except FileExistsError:
            raise NoteAlreadyExists(title) from None
        except OSError as e:
            raise StoreError(title, f"cannot create {path}: {e}") from e

    def write_note(self, title: str, content: str) -> None:
        path = self.note_path(title)
        if not path.is_file():
            raise NoteNotFound(title)
        try:
            atomic_write_text(path, content)
        except OSError as e:
            raise StoreError(title, f"cannot write {path}: {e}") from e

    def delete_note(self, title: str) -> None:
        path = self.note_path(title)
        try:
            path.unlink()
        except FileNotFoundError:
            raise NoteNotFound(title) from None
        except OSError as e:
            raise StoreError(title, f"cannot delete {path}: {e}") from e
