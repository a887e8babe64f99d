from __future__ import annotations

from PySide6.QtCore import QObject, QRunnable, Signal

from notegraph.graph.builder import NoteInput, build_graph


class GraphBuildSignals(QObject):
    finished = Signal(int, dict)   # req_id, payload
    failed = Signal(int, str)      # req_id, error


class GraphBuildWorker(QRunnable):
    """
    Builds a graph from a snapshot of note contents off the UI thread.

    The snapshot carries every content up front, so the worker never touches
    the store or the cache.

    payload = {"nodes": [...], "edges": [...], "stats": {...}, "center": str | None}
    """

    def __init__(
        self,
        *,
        req_id: int,
        notes: list[NoteInput],
        center: str | None = None,
        depth: int = 1,
    ):
        super().__init__()
        self.req_id = req_id
        self.notes = list(notes)
        self.center = center
        self.depth = max(1, int(depth))
        self.signals = GraphBuildSignals()

    def run(self) -> None:
        try:
            graph = build_graph(self.notes)
            stats = dict(graph.stats)
            if self.center:
                graph = graph.neighbourhood(self.center, self.depth)
                stats.update(graph.stats)

            payload = graph.to_payload()
            payload["stats"] = stats
            payload["center"] = self.center
            self.signals.finished.emit(self.req_id, payload)
        except Exception as exc:
            self.signals.failed.emit(self.req_id, str(exc))
