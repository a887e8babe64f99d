from .core import NavigationHistory, NoteCache, extract_links
from .graph import Graph, NodeKind, build_graph
from .services import CascadeCoordinator, NoteSession, RenameStage
from .vault import FsNoteStore, MemoryNoteStore

__version__ = "0.1.0"

__all__ = ["NavigationHistory",
           "NoteCache",
           "extract_links",
           "Graph",
           "NodeKind",
           "build_graph",
           "CascadeCoordinator",
           "NoteSession",
           "RenameStage",
           "FsNoteStore",
           "MemoryNoteStore",
           ]
