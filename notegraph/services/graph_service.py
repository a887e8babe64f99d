from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QObject, QThreadPool, QTimer, Slot

from notegraph.graph.builder import NoteInput
from notegraph.graph.worker import GraphBuildWorker
from notegraph.settings import DEFAULT_GRAPH_DEBOUNCE_MS


class GraphService(QObject):
    """
    Rebuilds the note graph in the background after notes change.

    Bursts of edits collapse into one build after `debounce_ms`. Each build
    gets a request id and only the newest one reaches `on_finished` /
    `on_failed`. Builds share a one-thread pool, so two never run at once.
    """

    def __init__(
        self,
        *,
        on_finished: Callable[[int, dict], None],
        on_failed: Callable[[int, str], None],
        thread_pool: QThreadPool | None = None,
        debounce_ms: int = DEFAULT_GRAPH_DEBOUNCE_MS,
    ):
        super().__init__()

        if thread_pool is None:
            thread_pool = QThreadPool(self)
            thread_pool.setMaxThreadCount(1)
        self._pool = thread_pool
        self._on_finished = on_finished
        self._on_failed = on_failed

        self._req_id = 0

        self._debounce_timer = QTimer(self)
        self._debounce_timer.setSingleShot(True)
        self._debounce_timer.setInterval(debounce_ms)
        self._debounce_timer.timeout.connect(self._build_now)

        self._pending: dict | None = None

    @property
    def pool(self) -> QThreadPool:
        return self._pool

    @property
    def last_request_id(self) -> int:
        return self._req_id

    def request_build(
        self,
        notes: list[NoteInput],
        *,
        center: str | None = None,
        depth: int = 1,
        immediate: bool = False,
    ) -> None:
        """
        Queue a build of `notes` (contents already filled in).

        A later call before the timer fires replaces this one; `immediate`
        skips the timer.
        """
        self._pending = {"notes": list(notes), "center": center, "depth": depth}

        if immediate:
            if self._debounce_timer.isActive():
                self._debounce_timer.stop()
            self._build_now()
        else:
            self._debounce_timer.start()

    def _build_now(self) -> None:
        if self._pending is None:
            return

        self._req_id += 1
        req_id = self._req_id

        snap = self._pending
        self._pending = None

        worker = GraphBuildWorker(
            req_id=req_id,
            notes=snap["notes"],
            center=snap["center"],
            depth=snap["depth"],
        )
        worker.signals.finished.connect(self._handle_finished)
        worker.signals.failed.connect(self._handle_failed)

        self._pool.start(worker)

    @Slot(int, dict)
    def _handle_finished(self, req_id: int, payload: dict) -> None:
        if req_id != self._req_id:
            return
        self._on_finished(req_id, payload)

    @Slot(int, str)
    def _handle_failed(self, req_id: int, error: str) -> None:
        if req_id != self._req_id:
            return
        self._on_failed(req_id, error)
