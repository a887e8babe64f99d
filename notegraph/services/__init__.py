from .cascade import CascadeCoordinator, DeleteResult, RenameResult, RenameStage
from .session import NoteSession, OpenedNote

__all__ = ["CascadeCoordinator",
           "DeleteResult",
           "RenameResult",
           "RenameStage",
           "NoteSession",
           "OpenedNote",
           ]
