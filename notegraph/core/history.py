from __future__ import annotations


class NavigationHistory:
    """
    Back/forward history of visited note titles.

    `entries` is the visited sequence and `position` indexes the current
    title (-1 when empty). Visiting a new title drops the forward branch.
    Knows nothing about UI or storage, only titles.
    """

    def __init__(self, *, limit: int | None = None) -> None:
        if limit is not None and limit < 1:
            raise ValueError("limit must be >= 1 or None")
        self._limit = limit
        self._entries: list[str] = []
        self._pos = -1

    @property
    def position(self) -> int:
        return self._pos

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    @property
    def current(self) -> str | None:
        """Title at the cursor, or None for an empty history."""
        if self._pos < 0:
            return None
        return self._entries[self._pos]

    def visit(self, title: str) -> None:
        if self._pos >= 0 and self._entries[self._pos] == title:
            return

        del self._entries[self._pos + 1:]
        self._entries.append(title)

        if self._limit is not None and len(self._entries) > self._limit:
            del self._entries[: len(self._entries) - self._limit]

        self._pos = len(self._entries) - 1

    def peek_back(self) -> str | None:
        """Title back() would move to, without moving."""
        if self._pos <= 0:
            return None
        return self._entries[self._pos - 1]

    def peek_forward(self) -> str | None:
        if self._pos >= len(self._entries) - 1:
            return None
        return self._entries[self._pos + 1]

    def back(self) -> str | None:
        if self._pos <= 0:
            return None
        self._pos -= 1
        return self._entries[self._pos]

    def forward(self) -> str | None:
        if self._pos >= len(self._entries) - 1:
            return None
        self._pos += 1
        return self._entries[self._pos]

    def can_go_back(self) -> bool:
        return self._pos > 0

    def can_go_forward(self) -> bool:
        return self._pos < len(self._entries) - 1

    def clear(self) -> None:
        self._entries.clear()
        self._pos = -1

    def rename(self, old_title: str, new_title: str) -> bool:
        """
        Point every `old_title` entry at `new_title`.

        Neighbours that become equal are merged so back/forward never
        "moves" to the same note. Returns True if anything changed.
        """
        if old_title == new_title or old_title not in self._entries:
            return False

        entries: list[str] = []
        pos = -1
        for i, title in enumerate(self._entries):
            if title == old_title:
                title = new_title
            if not entries or entries[-1] != title:
                entries.append(title)
            if i == self._pos:
                pos = len(entries) - 1

        self._entries = entries
        self._pos = pos
        return True
