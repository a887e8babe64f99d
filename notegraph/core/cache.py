from __future__ import annotations

import logging

from notegraph.settings import APP_NAME
from notegraph.vault.store import ContentStore

log = logging.getLogger(APP_NAME)


class NoteCache:
    """
    Read-through / write-through cache of note contents keyed by title.

    No eviction. Not thread-safe: callers serialize access (one session,
    one thread of control).
    """

    def __init__(self, store: ContentStore) -> None:
        self._store = store
        self._entries: dict[str, str] = {}

    @property
    def store(self) -> ContentStore:
        return self._store

    def __contains__(self, title: str) -> bool:
        return title in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def peek(self, title: str) -> str | None:
        """Cached content without touching the store."""
        return self._entries.get(title)

    def read(self, title: str) -> str:
        """Cached content, or read from the store and remember it. Raises NoteNotFound."""
        cached = self._entries.get(title)
        if cached is not None:
            return cached

        content = self._store.read_note(title)
        self._entries[title] = content
        return content

    def write(self, title: str, content: str) -> None:
        # The entry only changes once the store accepted the write.
        self._store.write_note(title, content)
        self._entries[title] = content

    def put(self, title: str, content: str) -> None:
        """Set an entry for content already known to be in the store."""
        self._entries[title] = content

    def invalidate(self, title: str) -> None:
        if self._entries.pop(title, None) is not None:
            log.debug("Cache invalidated: %s", title)

    def clear(self) -> None:
        self._entries.clear()
