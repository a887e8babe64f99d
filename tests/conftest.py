import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest
from PySide6.QtCore import QCoreApplication

from notegraph.core.cache import NoteCache
from notegraph.vault.store import MemoryNoteStore


@pytest.fixture(scope="session")
def qapp():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def store():
    return MemoryNoteStore()


@pytest.fixture
def cache(store):
    return NoteCache(store)
