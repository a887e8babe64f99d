from .builder import Graph, GraphNode, Link, NodeKind, NoteInput, build_graph

__all__ = ["Graph", "GraphNode", "Link", "NodeKind", "NoteInput", "build_graph"]
