from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from notegraph.core.errors import InvalidTitle, NoteAlreadyExists, NoteNotFound, StoreError


@dataclass(frozen=True)
class NoteListing:
    title: str
    exists: bool = True


class ContentStore(Protocol):
    """
    Where note files live. Every method raises a StoreError subclass on failure:

      read_note / write_note / delete_note -> NoteNotFound if absent
      create_note                          -> NoteAlreadyExists on collision
    """

    def list_notes(self) -> list[NoteListing]: ...

    def read_note(self, title: str) -> str: ...

    def create_note(self, title: str) -> None: ...

    def write_note(self, title: str, content: str) -> None: ...

    def delete_note(self, title: str) -> None: ...


def default_note_text(title: str) -> str:
    return f"# {title}\n\nStart writing your note here..."


@dataclass
class MemoryNoteStore:
    """
    In-process store keeping notes in a dict.

    `fail_on` maps an operation name ("read", "create", "write", "delete")
    to a set of titles for which that operation raises StoreError.
    `reads` counts read_note calls.
    """

    notes: dict[str, str] = field(default_factory=dict)
    fail_on: dict[str, set[str]] = field(default_factory=dict)
    reads: int = 0

    def _check(self, op: str, title: str) -> None:
        if title in self.fail_on.get(op, set()):
            raise StoreError(title, f"{op} failed for {title!r}")

    def list_notes(self) -> list[NoteListing]:
        return [NoteListing(title) for title in self.notes]

    def read_note(self, title: str) -> str:
        self.reads += 1
        self._check("read", title)
        try:
            return self.notes[title]
        except KeyError:
            raise NoteNotFound(title) from None

    def create_note(self, title: str) -> None:
        if not title:
            raise InvalidTitle(title, "empty title")
        self._check("create", title)
        if title in self.notes:
            raise NoteAlreadyExists(title)
        self.notes[title] = default_note_text(title)

    def write_note(self, title: str, content: str) -> None:
        self._check("write", title)
        if title not in self.notes:
            raise NoteNotFound(title)
        self.notes[title] = content

    def delete_note(self, title: str) -> None:
        self._check("delete", title)
        if title not in self.notes:
            raise NoteNotFound(title)
        del self.notes[title]
