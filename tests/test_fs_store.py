import pytest

from notegraph.core.errors import InvalidTitle, NoteAlreadyExists, NoteNotFound
from notegraph.core.filenames import is_safe_title, sanitize_title
from notegraph.services.session import NoteSession
from notegraph.vault.fs_store import FsNoteStore, atomic_write_text


@pytest.fixture
def fs_store(tmp_path):
    s = FsNoteStore(tmp_path / "vault")
    s.ensure()
    return s


def test_create_read_write_delete(fs_store):
    fs_store.create_note("A")
    assert fs_store.read_note("A") == "# A\n\nStart writing your note here..."

    fs_store.write_note("A", "hello [[B]]")
    assert (fs_store.vault_dir / "A.md").read_text(encoding="utf-8") == "hello [[B]]"

    fs_store.delete_note("A")
    assert fs_store.list_notes() == []


def test_errors(fs_store):
    with pytest.raises(NoteNotFound):
        fs_store.read_note("nope")
    with pytest.raises(NoteNotFound):
        fs_store.write_note("nope", "x")
    with pytest.raises(NoteNotFound):
        fs_store.delete_note("nope")

    fs_store.create_note("A")
    with pytest.raises(NoteAlreadyExists):
        fs_store.create_note("A")


def test_invalid_titles(fs_store):
    for bad in ("", "   ", "a/b", "what?"):
        with pytest.raises(InvalidTitle):
            fs_store.create_note(bad)


def test_list_notes_ignores_other_files(fs_store):
    fs_store.create_note("B")
    fs_store.create_note("A")
    (fs_store.vault_dir / "readme.txt").write_text("x", encoding="utf-8")

    assert [n.title for n in fs_store.list_notes()] == ["A", "B"]


def test_atomic_write_leaves_no_temp_files(tmp_path):
    p = tmp_path / "n.md"
    atomic_write_text(p, "one")
    atomic_write_text(p, "two")
    assert p.read_text(encoding="utf-8") == "two"
    assert [x.name for x in tmp_path.iterdir()] == ["n.md"]


def test_sanitize_title():
    assert sanitize_title('a/b\\c:d*e?f"g<h>i|j') == "a_b_c_d_e_f_g_h_i_j"
    assert is_safe_title("Plain title")
    assert not is_safe_title("a:b")


def test_session_rename_on_disk(fs_store):
    fs_store.create_note("Old")
    fs_store.write_note("Old", "content [[Other]]")
    session = NoteSession(fs_store)

    res = session.rename_note("Old", "New")

    assert res.ok
    assert [n.title for n in fs_store.list_notes()] == ["New"]
    assert fs_store.read_note("New") == "content [[Other]]"
