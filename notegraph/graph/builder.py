from __future__ import annotations

import enum
import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass, field

from notegraph.core.cache import NoteCache
from notegraph.core.errors import DuplicateTitle, StoreError
from notegraph.core.wikilinks import extract_links
from notegraph.settings import APP_NAME

log = logging.getLogger(APP_NAME)


class NodeKind(str, enum.Enum):
    MATERIALIZED = "materialized"
    # linked to, but no such note exists
    GHOST = "ghost"


@dataclass(frozen=True)
class GraphNode:
    id: str
    kind: NodeKind


@dataclass(frozen=True)
class Link:
    src: str
    dst: str


@dataclass(frozen=True)
class NoteInput:
    """A note to place in the graph; content None means "read it through the cache"."""
    title: str
    content: str | None = None


@dataclass
class Graph:
    """
    nodes: title -> GraphNode, in creation order (input notes first, then ghosts)
    edges: one Link per [[...]] occurrence, self-loops and repeats included
    """

    nodes: dict[str, GraphNode] = field(default_factory=dict)
    edges: list[Link] = field(default_factory=list)
    stats: dict = field(default_factory=dict)

    def kind_of(self, title: str) -> NodeKind | None:
        node = self.nodes.get(title)
        return node.kind if node is not None else None

    def ghosts(self) -> list[str]:
        return [n.id for n in self.nodes.values() if n.kind is NodeKind.GHOST]

    def outgoing(self, title: str) -> list[str]:
        return [e.dst for e in self.edges if e.src == title]

    def backlinks(self, title: str) -> list[str]:
        """Notes linking to `title`, unique, sorted case-insensitively."""
        return sorted({e.src for e in self.edges if e.dst == title}, key=str.lower)

    def neighbourhood(self, center: str, depth: int = 1) -> Graph:
        """Subgraph of nodes within `depth` hops of `center`, ignoring edge direction."""
        if center not in self.nodes:
            return Graph()

        adj: dict[str, set[str]] = {}
        for e in self.edges:
            adj.setdefault(e.src, set()).add(e.dst)
            adj.setdefault(e.dst, set()).add(e.src)

        depth = max(1, int(depth))
        visited = {center}
        frontier = {center}
        for _ in range(depth):
            nxt: set[str] = set()
            for v in frontier:
                nxt |= adj.get(v, set())
            nxt -= visited
            visited |= nxt
            frontier = nxt

        return Graph(
            nodes={k: n for k, n in self.nodes.items() if k in visited},
            edges=[e for e in self.edges if e.src in visited and e.dst in visited],
            stats={"center": center, "depth": depth},
        )

    def to_payload(self) -> dict:
        """Plain data for a renderer: {id, kind} nodes and {from, to} edges."""
        return {
            "nodes": [{"id": n.id, "kind": n.kind.value} for n in self.nodes.values()],
            "edges": [{"from": e.src, "to": e.dst} for e in self.edges],
        }


def _content_for(note: NoteInput, cache: NoteCache | None) -> tuple[str, bool]:
    if note.content is not None:
        return note.content, True
    if cache is None:
        return "", True
    try:
        return cache.read(note.title), True
    except StoreError as e:
        # one unreadable note must not block the whole graph
        log.warning("Graph build: cannot read %r, treating as empty: %s", note.title, e)
        return "", False


def build_graph(notes: Iterable[NoteInput], cache: NoteCache | None = None) -> Graph:
    """
    Build the link graph for `notes`.

    Every input note becomes a MATERIALIZED node; every link target with no
    node yet becomes a GHOST. Raises DuplicateTitle if two inputs share a title.
    Storage is only touched to fill the cache on a miss.
    """
    t0 = time.perf_counter()
    notes = list(notes)

    graph = Graph()
    for note in notes:
        if note.title in graph.nodes:
            raise DuplicateTitle(note.title)
        graph.nodes[note.title] = GraphNode(note.title, NodeKind.MATERIALIZED)

    unreadable = 0
    for note in notes:
        content, readable = _content_for(note, cache)
        if not readable:
            unreadable += 1
        for target in extract_links(content):
            if target not in graph.nodes:
                graph.nodes[target] = GraphNode(target, NodeKind.GHOST)
            graph.edges.append(Link(note.title, target))

    graph.stats = {
        "notes": len(notes),
        "nodes": len(graph.nodes),
        "ghosts": len(graph.nodes) - len(notes),
        "edges": len(graph.edges),
        "unreadable": unreadable,
        "time_ms": (time.perf_counter() - t0) * 1000.0,
    }
    log.debug("Graph built: %s", graph.stats)
    return graph

