from .cache import NoteCache
from .errors import (
    DuplicateTitle,
    InvalidTitle,
    NoteAlreadyExists,
    NoteGraphError,
    NoteNotFound,
    StoreError,
)
from .filenames import is_safe_title, sanitize_title
from .history import NavigationHistory
from .wikilinks import extract_links, wikilinks_to_html

__all__ = ["NoteCache",
           "DuplicateTitle",
           "InvalidTitle",
           "NoteAlreadyExists",
           "NoteGraphError",
           "NoteNotFound",
           "StoreError",
           "is_safe_title",
           "sanitize_title",
           "NavigationHistory",
           "extract_links",
           "wikilinks_to_html",
           ]
