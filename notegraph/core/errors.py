from __future__ import annotations


class NoteGraphError(Exception):
    """Base class for every error raised by the engine."""


class StoreError(NoteGraphError):
    """A content-store operation failed for `title`."""

    def __init__(self, title: str, message: str | None = None):
        self.title = title
        super().__init__(message or f"store operation failed for {title!r}")


class NoteNotFound(StoreError):
    def __init__(self, title: str):
        super().__init__(title, f"note not found: {title!r}")


class NoteAlreadyExists(StoreError):
    def __init__(self, title: str):
        super().__init__(title, f"note already exists: {title!r}")


class InvalidTitle(StoreError):
    def __init__(self, title: str, reason: str = "invalid title"):
        self.reason = reason
        super().__init__(title, f"{reason}: {title!r}")


class DuplicateTitle(NoteGraphError):
    """Graph build input contained the same title twice."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"duplicate note title in graph input: {title!r}")
