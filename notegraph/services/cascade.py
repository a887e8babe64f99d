from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from notegraph.core.cache import NoteCache
from notegraph.core.errors import NoteNotFound, StoreError
from notegraph.core.history import NavigationHistory
from notegraph.settings import APP_NAME

log = logging.getLogger(APP_NAME)


class RenameStage(str, enum.Enum):
    SOURCE_NOT_FOUND = "source_not_found"
    TARGET_CREATE_FAILED = "target_create_failed"
    TARGET_WRITE_FAILED = "target_write_failed"
    # both titles now hold the content; the caller has to reconcile
    SOURCE_DELETE_FAILED = "source_delete_failed"


@dataclass(frozen=True)
class RenameResult:
    old_title: str
    new_title: str
    ok: bool
    stage: RenameStage | None = None
    error: str | None = None
    # only meaningful for TARGET_WRITE_FAILED: was the half-made target removed?
    cleanup_ok: bool = True

    @property
    def duplicated(self) -> bool:
        return self.stage is RenameStage.SOURCE_DELETE_FAILED


@dataclass(frozen=True)
class DeleteResult:
    title: str
    ok: bool
    error: str | None = None
    not_found: bool = False


class CascadeCoordinator:
    """
    Composes rename out of read + create + write + delete, and keeps the
    cache (and optionally the navigation history) in step with storage.

    Never raises for store failures; results say which stage failed.
    Does not rebuild the graph, the caller does that after a mutation.
    """

    def __init__(self, cache: NoteCache, *, history: NavigationHistory | None = None) -> None:
        self._cache = cache
        self._history = history

    def rename(self, old_title: str, new_title: str) -> RenameResult:
        store = self._cache.store

        # 1. read
        try:
            content = self._cache.read(old_title)
        except StoreError as e:
            return self._fail(old_title, new_title, RenameStage.SOURCE_NOT_FOUND, e)

        # 2. create (nothing destructive has happened yet)
        try:
            store.create_note(new_title)
        except StoreError as e:
            return self._fail(old_title, new_title, RenameStage.TARGET_CREATE_FAILED, e)

        # 3. write
        try:
            store.write_note(new_title, content)
        except StoreError as e:
            cleanup_ok = True
            try:
                store.delete_note(new_title)
            except StoreError:
                cleanup_ok = False
                log.exception("Rename cleanup failed: could not delete %r", new_title)
            self._cache.invalidate(new_title)
            return self._fail(
                old_title, new_title, RenameStage.TARGET_WRITE_FAILED, e, cleanup_ok=cleanup_ok
            )

        # 4. delete old; on failure the content stays at both titles
        try:
            store.delete_note(old_title)
        except NoteNotFound:
            # removed behind our back after step 1 read it from the cache;
            # the only copy is now at new_title
            log.warning("Rename: %r was already gone from the store", old_title)
        except StoreError as e:
            self._cache.put(new_title, content)
            return self._fail(old_title, new_title, RenameStage.SOURCE_DELETE_FAILED, e)

        # 5. commit cache/history
        self._cache.invalidate(old_title)
        self._cache.put(new_title, content)
        if self._history is not None:
            self._history.rename(old_title, new_title)

        log.info("Renamed note %r -> %r", old_title, new_title)
        return RenameResult(old_title, new_title, ok=True)

    def delete(self, title: str) -> DeleteResult:
        try:
            self._cache.store.delete_note(title)
        except StoreError as e:
            log.warning("Delete failed for %r: %s", title, e)
            return DeleteResult(title, ok=False, error=str(e), not_found=isinstance(e, NoteNotFound))

        self._cache.invalidate(title)
        log.info("Deleted note %r", title)
        return DeleteResult(title, ok=True)

    @staticmethod
    def _fail(
        old_title: str,
        new_title: str,
        stage: RenameStage,
        exc: Exception,
        *,
        cleanup_ok: bool = True,
    ) -> RenameResult:
        log.warning("Rename %r -> %r failed at %s: %s", old_title, new_title, stage.value, exc)
        return RenameResult(
            old_title,
            new_title,
            ok=False,
            stage=stage,
            error=str(exc),
            cleanup_ok=cleanup_ok,
        )
