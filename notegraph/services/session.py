from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from notegraph.core.cache import NoteCache
from notegraph.core.errors import NoteAlreadyExists, StoreError
from notegraph.core.history import NavigationHistory
from notegraph.graph.builder import Graph, NoteInput, build_graph
from notegraph.services.cascade import CascadeCoordinator, DeleteResult, RenameResult
from notegraph.settings import APP_NAME, EngineSettings
from notegraph.vault.store import ContentStore

log = logging.getLogger(APP_NAME)


@dataclass(frozen=True)
class OpenedNote:
    title: str
    content: str


class NoteSession:
    """
    Owns the cache, history and cascade coordinator for one open vault.

    Everything the UI layer does goes through here (or through the objects
    exposed as attributes); there is no module-level state.
    """

    def __init__(self, store: ContentStore, *, history_limit: int | None = None) -> None:
        self.store = store
        self.cache = NoteCache(store)
        self.history = NavigationHistory(limit=history_limit)
        self.cascade = CascadeCoordinator(self.cache, history=self.history)

    @classmethod
    def from_settings(cls, store: ContentStore, settings: EngineSettings) -> NoteSession:
        return cls(store, history_limit=settings.history_limit or None)

    @property
    def current_title(self) -> str | None:
        return self.history.current

    # ───────────────────────── notes ─────────────────────────

    def list_titles(self) -> list[str]:
        return [n.title for n in self.store.list_notes() if n.exists]

    def read_note(self, title: str) -> str:
        return self.cache.read(title)

    def create_note(self, title: str) -> None:
        self.store.create_note(title)
        self.cache.invalidate(title)

    def save_note(self, title: str, content: str) -> None:
        self.cache.write(title, content)

    def rename_note(self, old_title: str, new_title: str) -> RenameResult:
        return self.cascade.rename(old_title, new_title)

    def delete_note(self, title: str) -> DeleteResult:
        return self.cascade.delete(title)

    def ensure_linked_notes_exist(self, links: Iterable[str]) -> list[str]:
        """Create every linked title that has no note yet. Returns the created titles."""
        existing = set(self.list_titles())
        created: list[str] = []
        for title in links:
            if title in existing:
                continue
            try:
                self.create_note(title)
            except NoteAlreadyExists:
                pass
            except StoreError as e:
                log.warning("Could not create linked note %r: %s", title, e)
                continue
            else:
                created.append(title)
            existing.add(title)
        return created

    def search_titles(self, query: str) -> list[str]:
        """Titles containing `query`, case-insensitive, in store order."""
        titles = self.list_titles()
        query = query or ""
        if not query.strip():
            return titles
        needle = query.lower()
        return [t for t in titles if needle in t.lower()]

    # ───────────────────────── navigation ─────────────────────────

    def open_note(self, title: str) -> OpenedNote:
        """Read `title` and make it current. History is left alone if the read fails."""
        content = self.cache.read(title)
        self.history.visit(title)
        return OpenedNote(title, content)

    def go_back(self) -> OpenedNote | None:
        """Step back. The cursor only moves once the note was read."""
        title = self.history.peek_back()
        if title is None:
            return None
        content = self.cache.read(title)
        self.history.back()
        return OpenedNote(title, content)

    def go_forward(self) -> OpenedNote | None:
        title = self.history.peek_forward()
        if title is None:
            return None
        content = self.cache.read(title)
        self.history.forward()
        return OpenedNote(title, content)

    # ───────────────────────── graph ─────────────────────────

    def refresh_graph(self) -> Graph:
        """Full rebuild from the current note list."""
        return build_graph((NoteInput(t) for t in self.list_titles()), self.cache)

    def graph_snapshot(self) -> list[NoteInput]:
        """
        Note list with contents filled in, for building on another thread.
        Unreadable notes get empty content.
        """
        notes: list[NoteInput] = []
        for title in self.list_titles():
            try:
                content = self.cache.read(title)
            except StoreError as e:
                log.warning("Snapshot: cannot read %r, treating as empty: %s", title, e)
                content = ""
            notes.append(NoteInput(title, content))
        return notes
