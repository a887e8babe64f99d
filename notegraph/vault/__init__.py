from .fs_store import FsNoteStore, atomic_write_text
from .store import ContentStore, MemoryNoteStore, NoteListing

__all__ = ["FsNoteStore", "atomic_write_text", "ContentStore", "MemoryNoteStore", "NoteListing"]
